"""LLM factory and the Gemini-backed text generation capability.

The name pipeline only needs "send an instruction, get text back", so the
model is wrapped behind the small ``TextGenerator`` protocol. Tests swap in
a deterministic stub; production uses ``GeminiTextGenerator``.
"""

import logging
from typing import Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langchain_google_vertexai import ChatVertexAI

from src.config import Settings, settings
from src.errors import NameGenerationError, NotConfiguredError, RequestFailedError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Capability that turns a single instruction into a text blob."""

    async def agenerate(self, instruction: str, model: str | None = None) -> str:
        """Send the instruction and return the model's text response."""
        ...


def get_llm(
    model: str | None = None,
    temperature: float | None = None,
    config: Settings | None = None,
) -> ChatVertexAI:
    """Get a Gemini chat model on Vertex AI.

    Args:
        model: Model name. If None, uses settings.llm_model.
        temperature: Override default temperature. If None, uses settings.llm_temperature.
        config: Settings to read from. Defaults to the process settings.

    Returns:
        ChatVertexAI instance.

    Raises:
        NotConfiguredError: If no Google Cloud project is configured.
    """
    config = config or settings
    if not config.is_llm_configured:
        raise NotConfiguredError()

    temp = temperature if temperature is not None else config.llm_temperature

    return ChatVertexAI(
        model_name=model or config.llm_model,
        project=config.google_project_id,
        location=config.google_location,
        temperature=temp,
    )


class GeminiTextGenerator:
    """Text generation capability backed by a LangChain chat model."""

    def __init__(self, llm: BaseChatModel | None = None, config: Settings | None = None):
        """Initialize the generator.

        Args:
            llm: Optional chat model. Built lazily from settings if not provided,
                so constructing the generator never touches the network.
            config: Settings used when building the model.
        """
        self.llm = llm
        self.config = config or settings
        self.prompt = ChatPromptTemplate.from_messages([("human", "{instruction}")])
        self._chains: dict[str, Runnable] = {}

    def _get_chain(self, model: str | None) -> Runnable:
        key = model or self.config.llm_model
        if key not in self._chains:
            llm = self.llm or get_llm(model=key, config=self.config)
            self._chains[key] = self.prompt | llm | StrOutputParser()
        return self._chains[key]

    async def agenerate(self, instruction: str, model: str | None = None) -> str:
        """Send an instruction to Gemini and return the raw text.

        Args:
            instruction: Complete prompt text.
            model: Optional model override.

        Returns:
            The text returned by the model.

        Raises:
            NotConfiguredError: If the model cannot be built from settings.
            RequestFailedError: If the call fails or returns no text.
        """
        try:
            chain = self._get_chain(model)
            text = await chain.ainvoke({"instruction": instruction})
        except NameGenerationError:
            raise
        except Exception as e:
            raise RequestFailedError(str(e)) from e

        if not isinstance(text, str):
            raise RequestFailedError("The model returned an empty response")
        return text


def get_text_generator(config: Settings | None = None) -> GeminiTextGenerator | None:
    """Build the text generator, or None when Gemini is not configured."""
    config = config or settings
    if not config.is_llm_configured:
        logger.warning("GOOGLE_PROJECT_ID is not set; name generation is disabled")
        return None
    return GeminiTextGenerator(config=config)
