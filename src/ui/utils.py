"""Utility functions for presenting generated names."""


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text to max length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated text with ellipsis if needed.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_name_list(names: list[str], numbered: bool = True) -> str:
    """Format names one per line for terminal output.

    Args:
        names: Store names in display order.
        numbered: Prefix each line with its 1-based position.

    Returns:
        Newline-separated names.
    """
    if not numbered:
        return "\n".join(names)
    return "\n".join(f"{i}. {name}" for i, name in enumerate(names, 1))
