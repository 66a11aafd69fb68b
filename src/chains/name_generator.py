"""Prompt construction and response parsing for store name generation."""

from langchain_core.prompts import PromptTemplate

STORE_NAME_PROMPT = PromptTemplate.from_template(
    "Generate {count} creative, memorable, and catchy store names based on this "
    "description: {description}. Consider the store type, target audience, and "
    "industry. The names should be unique, brandable, and available as .com "
    "domains. Each name should be 1-3 words maximum. Return only the store names, "
    "one per line, without any additional text or explanations."
)


def build_prompt(description: str, count: int = 5) -> str:
    """Build the store name instruction.

    Args:
        description: User-supplied store description, embedded verbatim.
        count: Number of names to request.

    Returns:
        Instruction text for the model.
    """
    return STORE_NAME_PROMPT.format(description=description, count=count)


def parse_names(raw_output: str) -> list[str]:
    """Split model output into names, one per non-blank line.

    No cap or validation is applied: the upstream order and count are kept.
    """
    return [line.strip() for line in raw_output.splitlines() if line.strip()]
