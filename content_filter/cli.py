#!/usr/bin/env python3
"""
Content Filter CLI Entry Point

Classifies, redacts and scores free text from the command line.

Usage:
    content-filter "some title to check"
    content-filter --file comments.txt --json
    cat titles.txt | content-filter --file - --fail-on-block
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import Config
from .error_handler import UserFriendlyError, get_friendly_message, safe_operation
from .profanity.analyzer import analyze
from .profanity.models import ClassificationResult
from .profanity.policy import should_block, should_require_review
from .reporting import generate_summary, print_summary, save_summary_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BLOCKED = 3
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="content-filter",
        description="Classify, redact and score free text for profanity and hate speech (fully offline)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  content-filter "You are an idiot and this sucks"
  content-filter --file titles.txt --json
  content-filter --file - --fail-on-block < comments.txt
  content-filter --config moderation.yaml --save-summary report.json -f titles.txt
        """
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to analyze (omit when using --file)"
    )

    parser.add_argument(
        "--file", "-f",
        type=Path,
        default=None,
        help="Analyze each non-empty line of a UTF-8 file ('-' reads stdin)"
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration YAML file"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON summary instead of the text report"
    )

    parser.add_argument(
        "--mask-char",
        type=str,
        default=None,
        help="Override the redaction mask character"
    )

    parser.add_argument(
        "--save-summary",
        type=Path,
        default=None,
        help="Save JSON summary to file"
    )

    parser.add_argument(
        "--fail-on-block",
        action="store_true",
        help=f"Exit with status {EXIT_BLOCKED} if any item must be blocked"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args(argv)
    if args.text is None and args.file is None:
        parser.error("either TEXT or --file is required")
    if args.text is not None and args.file is not None:
        parser.error("TEXT and --file are mutually exclusive")
    return args


@safe_operation("reading input")
def read_items(args: argparse.Namespace) -> List[Tuple[str, str]]:
    """Return (label, text) pairs to analyze."""
    if args.file is None:
        return [("text", args.text)]

    if str(args.file) == "-":
        lines = sys.stdin.read().splitlines()
        source = "stdin"
    else:
        with open(args.file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
        source = args.file.name

    items = [
        (f"{source}:{number}", line)
        for number, line in enumerate(lines, 1)
        if line.strip()
    ]
    logger.info(f"Read {len(items)} item(s) from {source}")
    return items


def format_result(label: str, result: ClassificationResult) -> str:
    """One-item text report."""
    tier = result.severity_tier.value.upper()
    flags = []
    if should_block(result):
        flags.append("BLOCK")
    elif should_require_review(result):
        flags.append("REVIEW")

    lines = [f"[{tier}] {label}" + (f" ({', '.join(flags)})" if flags else "")]
    if result.flagged_terms:
        lines.append(f"  flagged:    {', '.join(result.flagged_terms)}")
    lines.append(f"  redacted:   {result.redacted_text}")
    lines.append(f"  confidence: {result.confidence:.2f}")
    return "\n".join(lines)


def apply_overrides(config: Config, args: argparse.Namespace) -> None:
    """Apply CLI overrides to config."""
    if args.mask_char is not None:
        config.moderation.mask_char = args.mask_char
        logger.info(f"CLI override: mask char = {args.mask_char!r}")

    if args.fail_on_block:
        config.moderation.fail_on_block = True

    if args.json:
        config.output.format = "json"

    if args.save_summary is not None:
        config.output.summary_path = str(args.save_summary)

    if args.quiet:
        config.logging.level = "WARNING"
    elif args.verbose:
        config.logging.level = "DEBUG"

    config.moderation.validate()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = Config.load(args.config)
        apply_overrides(config, args)
        config.setup_logging(force=True)

        lexicon = config.build_lexicon()
        items = read_items(args)

        labels = [label for label, _ in items]
        results = [analyze(text, lexicon, config.moderation.mask_char) for _, text in items]
        summary = generate_summary(results, labels)

        if config.output.format == "json":
            print(json.dumps(summary, indent=2))
        else:
            for label, result in zip(labels, results):
                print(format_result(label, result))
            if len(results) > 1:
                print_summary(summary)

        if config.output.summary_path:
            save_summary_json(summary, Path(config.output.summary_path))

        if config.moderation.fail_on_block and summary["summary"]["blocked_items"]:
            logger.warning(f"{summary['summary']['blocked_items']} item(s) must be blocked")
            return EXIT_BLOCKED

        return EXIT_OK

    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    except (UserFriendlyError, ValueError) as e:
        message = e.user_message if isinstance(e, UserFriendlyError) else str(e)
        logger.error(f"Moderation failed: {e}")
        print(f"Error: {message}", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        logger.exception("Moderation failed")
        title, message = get_friendly_message(e)
        print(f"Error: {title}: {message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
