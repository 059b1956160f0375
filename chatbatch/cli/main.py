"""Command line interface for running prompt batches."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from chatbatch.config import load_config
from chatbatch.core.connector import PROMPT_PROPERTY, run
from chatbatch.exceptions import ConfigurationError
from chatbatch.utils import set_log_level


def parse_property(value: str) -> tuple:
    """Parse a ``key=value`` property; the value is JSON-decoded when possible."""
    if "=" not in value:
        raise argparse.ArgumentTypeError(f"Property must look like key=value, got {value!r}")

    key, raw = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"Property name missing in {value!r}")

    try:
        parsed: Any = json.loads(raw)
    except json.JSONDecodeError:
        parsed = raw
    return key, parsed


def read_prompts(prompts: Optional[List[str]], prompts_file: Optional[str]) -> List[str]:
    """Collect prompts from flags followed by the non-empty lines of a file."""
    collected = list(prompts or [])
    if prompts_file:
        text = Path(prompts_file).read_text(encoding="utf-8")
        collected.extend(line for line in text.splitlines() if line.strip())
    return collected


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="chatbatch",
        description="Run prompts as one conversation, attaching referenced images and PDFs"
    )
    parser.add_argument("--model", "-m", required=True, help="Model to use (e.g., gpt-4o)")
    parser.add_argument("--prompt", "-p", action="append", dest="prompts", help="Prompt (repeatable, kept in order)")
    parser.add_argument("--prompts-file", help="File with one prompt per line")
    parser.add_argument("--system", help="Instruction text sent before the first prompt")
    parser.add_argument(
        "--property",
        action="append",
        dest="properties",
        type=parse_property,
        default=[],
        help="Request property as key=value (repeatable, JSON values allowed)"
    )
    parser.add_argument("--api-key", help="API key (default: OPENAI_API_KEY)")
    parser.add_argument("--env-file", help="Path to a .env file")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the chatbatch CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    set_log_level(args.log_level)

    try:
        prompts = read_prompts(args.prompts, args.prompts_file)
    except OSError as e:
        print(f"Error reading prompts: {e}", file=sys.stderr)
        return 2

    if not prompts:
        print("No prompts given; use --prompt or --prompts-file", file=sys.stderr)
        return 2

    properties: Dict[str, Any] = dict(args.properties)
    if args.system:
        properties[PROMPT_PROPERTY] = args.system

    try:
        config = load_config(args.env_file)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings: Dict[str, Any] = {}
    if args.api_key:
        settings[config.api_key_setting] = args.api_key

    result = run(args.model, prompts, properties, settings, config=config)
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
