"""Store name request pipeline.

Takes a store description, asks the text generator for names and keeps the
page state (phase, names, error) in step with the request.
"""

import asyncio
import logging
from typing import Literal

from pydantic import BaseModel, Field

from src.chains.name_generator import build_prompt, parse_names
from src.config import settings
from src.errors import (
    GENERIC_FAILURE_MESSAGE,
    NameGenerationError,
    NotConfiguredError,
)
from src.llm import TextGenerator
from src.ui.state import UIState

logger = logging.getLogger(__name__)

FailureKind = Literal["not_configured", "request_failed"]


class GenerationResult(BaseModel):
    """Names returned by a successful request, in upstream order."""

    names: list[str] = Field(default_factory=list, description="Generated store names")


class GenerationFailure(BaseModel):
    """Outcome of a failed request."""

    error: str = Field(description="Human-readable error message")
    kind: FailureKind = Field(default="request_failed", description="Failure category")


class NameRequestPipeline:
    """Runs one store name request at a time against a text generator."""

    def __init__(
        self,
        generator: TextGenerator | None,
        state: UIState | None = None,
        model: str | None = None,
        count: int | None = None,
    ):
        """Initialize the pipeline.

        Args:
            generator: Text generation capability. None means not configured.
            state: State to update. A fresh UIState is created if not provided.
            model: Optional model name passed through to the generator.
            count: Number of names to request. Defaults to settings.name_count.
        """
        self.generator = generator
        self.state = state if state is not None else UIState()
        self.model = model
        self.count = count if count is not None else settings.name_count

    @property
    def is_busy(self) -> bool:
        return self.state.is_loading

    async def generate(self, description: str) -> GenerationResult | GenerationFailure | None:
        """Generate store names for a description.

        Blank descriptions and calls made while a request is outstanding are
        ignored and return None without touching the state.

        Args:
            description: Free-text store description.

        Returns:
            GenerationResult on success, GenerationFailure on any error.
        """
        if not description.strip():
            return None
        if self.is_busy:
            logger.warning("Ignoring name request while another is in flight")
            return None

        # Must happen before the first await so callers see Loading immediately
        self.state.start()

        try:
            if self.generator is None:
                raise NotConfiguredError()
            raw_output = await self.generator.agenerate(
                build_prompt(description, count=self.count),
                model=self.model,
            )
            if not isinstance(raw_output, str):
                raise TypeError("The model returned an empty response")
            names = parse_names(raw_output)
        except asyncio.CancelledError:
            self.state.fail("The request was cancelled")
            raise
        except NameGenerationError as e:
            logger.warning(f"Name generation failed: {e}")
            return self._fail(str(e), e.kind)
        except Exception as e:
            logger.exception("Unexpected error generating store names")
            return self._fail(str(e) or GENERIC_FAILURE_MESSAGE, "request_failed")

        logger.info(f"Generated {len(names)} store names")
        self.state.succeed(names)
        return GenerationResult(names=names)

    def _fail(self, message: str, kind: FailureKind) -> GenerationFailure:
        self.state.fail(message)
        return GenerationFailure(error=message, kind=kind)
