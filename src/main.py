"""Command-line entry point for store name generation."""

import argparse
import asyncio
import logging
import sys

import httpx

from src.chains.name_pipeline import GenerationFailure, NameRequestPipeline
from src.config import settings
from src.llm import get_text_generator
from src.ui.api_client import APIClient, APIError
from src.ui.utils import format_name_list, truncate_text

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def generate_locally(description: str) -> list[str]:
    """Run the name pipeline in-process.

    Raises:
        RuntimeError: If generation fails.
    """
    pipeline = NameRequestPipeline(get_text_generator())
    outcome = asyncio.run(pipeline.generate(description))
    if isinstance(outcome, GenerationFailure):
        raise RuntimeError(outcome.error)
    return outcome.names if outcome else []


def generate_remotely(description: str, api_url: str) -> list[str]:
    """Generate names through a running API server."""
    client = APIClient(base_url=api_url)
    try:
        return client.generate(description)
    except (APIError, httpx.RequestError) as e:
        raise RuntimeError(str(e)) from e


def main(argv: list[str] | None = None) -> int:
    """Main function for the store name CLI."""
    parser = argparse.ArgumentParser(
        description="Generate store names from a store description"
    )
    parser.add_argument(
        "description",
        nargs="?",
        default=None,
        help="Store description (reads stdin if omitted)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Generate through a running API server instead of calling Gemini directly",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print names without numbering",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    description = args.description if args.description is not None else sys.stdin.read()
    if not description.strip():
        logger.error("No store description given")
        return 1

    logger.info(f"Generating store names for: {truncate_text(description.strip(), 60)}")

    try:
        if args.api_url:
            names = generate_remotely(description, args.api_url)
        else:
            names = generate_locally(description)
    except RuntimeError as e:
        logger.error(f"Name generation failed: {e}")
        return 1

    print(format_name_list(names, numbered=not args.plain))
    return 0


if __name__ == "__main__":
    sys.exit(main())
