"""Command-line entry point.

Parses local files through a MinerU server and prints the markdown, or
saves the ZIP archive when one is requested. Environment variables are
loaded from .env file.

Usage:
    python -m mineru_client.main paper.pdf --lang en --output paper.md
    python -m mineru_client.main scan.png --zip scan.zip
"""

import argparse
import asyncio
import logging
import os
import sys
from contextlib import ExitStack
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

# Load environment variables before any other imports that might need them
load_dotenv()

from mineru_client.client import MineruClient  # noqa: E402
from mineru_client.errors import MineruApiError, MineruError  # noqa: E402
from mineru_client.models.request import ParseRequest  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Parse documents with a MinerU server")
    parser.add_argument("files", nargs="+", type=Path, help="PDF or image files to parse")
    parser.add_argument("--base-url", help="MinerU base URL (default: MINERU_BASE_URL)")
    parser.add_argument("--lang", action="append", dest="languages", help="OCR language code, repeatable")
    parser.add_argument("--backend", help="Backend engine, e.g. pipeline")
    parser.add_argument("--parse-method", help="Parse method: auto, txt or ocr")
    parser.add_argument("--no-formula", action="store_true", help="Disable formula extraction")
    parser.add_argument("--no-table", action="store_true", help="Disable table extraction")
    parser.add_argument("--start-page", type=int, default=0, help="First page to parse (0-based)")
    parser.add_argument("--end-page", type=int, default=99999, help="Last page to parse")
    parser.add_argument("--zip", type=Path, dest="zip_path", help="Request a ZIP archive and save it here")
    parser.add_argument("--output", type=Path, help="Write markdown here instead of stdout")
    return parser


async def run(args: argparse.Namespace) -> int:
    """Submit the files described by ``args`` and emit the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Process exit code.
    """
    with ExitStack() as stack:
        streams = [stack.enter_context(path.open("rb")) for path in args.files]

        builder = (
            ParseRequest.create()
            .with_files(*streams)
            .with_formula_enabled(not args.no_formula)
            .with_table_enabled(not args.no_table)
            .with_page_range(args.start_page, args.end_page)
            .with_zip_response(args.zip_path is not None)
        )
        if args.languages:
            builder.with_languages(*args.languages)
        if args.backend:
            builder.with_backend(args.backend)
        if args.parse_method:
            builder.with_parse_method(args.parse_method)

        async with MineruClient(args.base_url) as client:
            try:
                result = await client.parse_file(builder.build())
            except MineruApiError as e:
                logger.error(f"MinerU request failed: {e}")
                for error in e.validation_errors or []:
                    logger.error(f"  {'.'.join(str(part) for part in error.loc)}: {error.msg}")
                return 1

            async with result:
                if args.zip_path is not None:
                    await result.save_to_file(args.zip_path)
                    return 0

                markdown = await result.read_markdown()

    if args.output is not None:
        args.output.write_text(markdown, encoding="utf-8")
        logger.info(f"Wrote markdown to {args.output}")
    else:
        sys.stdout.write(markdown)
        if not markdown.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Application entry point."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    args = build_parser().parse_args(argv)

    try:
        return asyncio.run(run(args))
    except MineruError as e:
        logger.error(f"{e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
