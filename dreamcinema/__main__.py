"""
Dream Cinema Main Entry Point

Run the API server, or analyse / generate a single dream from the command line.
"""

import sys
import json
import asyncio
import argparse

from dreamcinema.core.config import get_settings
from dreamcinema.core.constants import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_DURATION_SECONDS,
    DEFAULT_STYLE,
)
from dreamcinema.core.exceptions import ValidationError
from dreamcinema.core.logging_config import LogLevel, setup_logging, get_logger
from dreamcinema.core.startup import validate_environment


def main():
    """Main entry point for Dream Cinema."""
    parser = argparse.ArgumentParser(
        description="Dream Cinema - turn dream narrations into short videos"
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the FastAPI server"
    )

    parser.add_argument(
        "--text", "-t",
        type=str,
        help="Dream text to analyse or generate from"
    )

    parser.add_argument(
        "--emotion", "-e",
        action="append",
        default=[],
        help="Emotion tag (repeatable)"
    )

    parser.add_argument(
        "--style", "-s",
        type=str,
        default=DEFAULT_STYLE,
        help=f"Visual style id (default: {DEFAULT_STYLE})"
    )

    parser.add_argument(
        "--duration", "-d",
        type=int,
        default=DEFAULT_DURATION_SECONDS,
        help=f"Clip length in seconds (default: {DEFAULT_DURATION_SECONDS})"
    )

    parser.add_argument(
        "--aspect-ratio", "-a",
        type=str,
        default=DEFAULT_ASPECT_RATIO,
        help=f"Aspect ratio id (default: {DEFAULT_ASPECT_RATIO})"
    )

    parser.add_argument(
        "--analyze-only",
        action="store_true",
        help="Print the dream analysis without generating a video"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    settings = get_settings()

    log_level = LogLevel.DEBUG if args.debug else LogLevel.from_name(settings.log_level)
    setup_logging(level=log_level, verbose=args.debug)

    logger = get_logger("main")

    validation_result = validate_environment(settings)
    if not validation_result.valid:
        logger.error("Environment validation failed:")
        for error in validation_result.errors:
            logger.error(f"  - {error}")
        sys.exit(1)
    for warning in validation_result.warnings:
        logger.warning(warning)

    if args.serve:
        from dreamcinema.api.main import start_server
        logger.info(f"Starting API server on {settings.host}:{settings.port}")
        start_server(host=settings.host, port=settings.port, reload=args.debug)
        return

    if not args.text:
        parser.error("--text is required unless --serve is given")

    try:
        output = asyncio.run(run_once(args))
    except ValidationError as e:
        print(f"Invalid dream: {e.message}", file=sys.stderr)
        sys.exit(2)

    print(json.dumps(output, indent=2))


async def run_once(args) -> dict:
    """Analyse or generate a single dream and return a printable dict."""
    from dreamcinema.service import DreamVideoService

    async with DreamVideoService() as service:
        if args.analyze_only:
            return service.describe(args.text, args.emotion).to_dict()
        result = await service.generate(
            args.text,
            args.emotion,
            args.style,
            args.duration,
            args.aspect_ratio,
        )
        return result.to_dict()


if __name__ == "__main__":
    main()
