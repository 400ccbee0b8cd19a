"""Command line entry point for generating lecture notes."""

import argparse
import mimetypes
import sys
from pathlib import Path

from lecture_scribe.dependencies import get_handler
from lecture_scribe.domain import DetailLevel
from lecture_scribe.exceptions import (
    AudioExtractionError,
    InvalidRequestError,
    NotesPipelineError,
)
from lecture_scribe.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="lecture-scribe",
        description="Generate structured study notes from a lecture recording",
    )
    parser.add_argument("file", type=Path, help="Audio or video file of the lecture")
    parser.add_argument(
        "--detail-level",
        choices=[level.value for level in DetailLevel],
        default=DetailLevel.MEDIUM.value,
        help="Depth of the generated notes (default: medium)",
    )
    parser.add_argument(
        "--content-type",
        default=None,
        help="Media type of the file; guessed from the extension when omitted",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write the markdown notes here"
    )
    parser.add_argument("--log-level", default=None, help="Log level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    content_type = args.content_type or mimetypes.guess_type(args.file.name)[0]

    try:
        data = args.file.read_bytes()
    except OSError as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    handler = get_handler()
    try:
        request = handler.build_request(
            data, content_type, args.detail_level, args.file.name
        )
        response = handler.process(request)
    except (InvalidRequestError, AudioExtractionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except NotesPipelineError as e:
        logger.error("Notes generation failed", extra={"stage": e.stage})
        print(f"error: {e.user_message}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(response.notes + "\n", encoding="utf-8")
        logger.info("Notes written", extra={"output": str(args.output)})
    else:
        print(response.notes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
