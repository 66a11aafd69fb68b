"""LangChain-based store name generation."""

from src.chains.name_generator import build_prompt, parse_names
from src.chains.name_pipeline import (
    GenerationFailure,
    GenerationResult,
    NameRequestPipeline,
)

__all__ = [
    "GenerationFailure",
    "GenerationResult",
    "NameRequestPipeline",
    "build_prompt",
    "parse_names",
]
