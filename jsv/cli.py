"""
Validate a CSV file against a JSON schema from the command line.

Exit codes: 0 when every record passes, 1 when any record fails, 2 when the
inputs cannot be read.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from jsv.config import configure_logging, get_validation_settings
from jsv.domain.errors import MalformedInputError
from jsv.services.csv_validation_service import (
    CSVFormatError,
    SchemaLoadError,
    get_csv_validation_service,
    load_schema,
)

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    settings = get_validation_settings()
    parser = argparse.ArgumentParser(
        prog="jsv",
        description="Validate CSV records against a JSON schema.",
    )
    parser.add_argument(
        "-s",
        "--schema",
        dest="schema",
        default=settings.default_schema_path,
        help="Path to the JSON schema file (default: %(default)s).",
    )
    parser.add_argument(
        "csv_file",
        help="Path to the CSV file to validate.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        with open(args.schema, "rb") as schema_file:
            schema = load_schema(schema_file)
    except OSError as exc:
        print(f"failed to open schema file ({args.schema}): {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (SchemaLoadError, MalformedInputError) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_BAD_INPUT

    service = get_csv_validation_service()
    try:
        with open(args.csv_file, encoding="utf-8-sig", newline="") as csv_file:
            summary = service.validate_stream(text_stream=csv_file, schema=schema)
    except OSError as exc:
        print(f"failed to open csv file ({args.csv_file}): {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (CSVFormatError, MalformedInputError) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_BAD_INPUT

    sys.stdout.write(summary.render())
    return EXIT_OK if summary.tally.success else EXIT_VALIDATION_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
