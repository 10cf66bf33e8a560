"""Command line entry point: JSON API description in, TypeScript out."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from apicodegen.codegen import codegen
from apicodegen.config import CodegenOptions
from apicodegen.errors import CodegenError
from apicodegen.formatting import Formatter, PrettierFormatter, SourceFormatter
from apicodegen.serialization import from_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apicodegen",
        description="Generate TypeScript declarations from a JSON API description.",
    )
    parser.add_argument("input", help="Path to the JSON description, or - for stdin")
    parser.add_argument("-o", "--out", dest="out", default=None, help="Write to file instead of stdout.")
    parser.add_argument(
        "--api-type-name",
        dest="api_type_name",
        default=CodegenOptions.api_type_name,
        help="Name of the aggregate endpoint tree type (default: %(default)s).",
    )
    parser.add_argument("--indent", dest="indent", type=int, default=2, help="Indent width (default: %(default)s).")
    parser.add_argument("--prettier", action="store_true", help="Format with the prettier executable.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


# Handler this module owns; loguru installs its default stderr sink as id 0
_handler_id: int | None = 0


def _configure_logging(verbose: bool) -> None:
    """Swap the owned stderr handler, leaving sinks added by callers in place."""
    global _handler_id
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # already removed by the embedding application
            pass
    _handler_id = logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for generating TypeScript declarations."""
    parsed_args = build_parser().parse_args(argv)
    _configure_logging(parsed_args.verbose)

    formatter: Formatter = PrettierFormatter() if parsed_args.prettier else SourceFormatter(indent=parsed_args.indent)
    options = CodegenOptions(api_type_name=parsed_args.api_type_name, formatter=formatter)

    try:
        if parsed_args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(parsed_args.input).read_text(encoding="utf-8")
        generated_typescript = codegen(from_json(text), options)
    except OSError as e:
        logger.error(f"Cannot read {parsed_args.input}: {e}")
        return 1
    except CodegenError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(generated_typescript, encoding="utf-8")
        logger.info(f"Wrote {output_path}")
    else:
        print(generated_typescript, end="")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
