"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or runs the FXQL parser locally for one file without persistence.
"""

import argparse
import json
import sys

import uvicorn

from fxql.api.routers.statements import (
    FXQL_CODE_INVALID_INPUT,
    FXQL_CODE_SUCCESS,
    FXQL_SUCCESS_MESSAGE,
    api_serialize_transaction_record,
)
from fxql.bootstrap import bootstrap_create_application
from fxql.config import config_load_settings
from fxql.domain import ParseFailure, domain_fxql_parse, domain_fxql_parse_entry_id
from fxql.logging_setup import configure_logging


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when a parsed submission is rejected.
    """

    argument_parser = argparse.ArgumentParser(description="FXQL statement parser runtime entrypoint")
    subparsers = argument_parser.add_subparsers(dest="command")
    subparsers.add_parser("api", help="Start the HTTP API server (default)")
    parse_parser = subparsers.add_parser("parse", help="Parse one FXQL file without persisting records")
    parse_parser.add_argument("path", nargs="?", default="-", help="FXQL file path, or `-` for stdin")
    decode_parser = subparsers.add_parser("decode-id", help="Print the UUID behind an FXQL entry id")
    decode_parser.add_argument("entry_id", help="Entry id such as `FXQL-...`")
    parsed_arguments = argument_parser.parse_args(argv)

    if parsed_arguments.command == "parse":
        raise SystemExit(main_parse_file(parsed_arguments.path))

    if parsed_arguments.command == "decode-id":
        try:
            print(domain_fxql_parse_entry_id(parsed_arguments.entry_id))
        except ValueError as error:
            argument_parser.error(f"invalid entry id: {error}")
        return

    settings = config_load_settings()
    configure_logging(settings.log_level)
    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_parse_file(path: str) -> int:
    """Parse one FXQL file and print the response envelope.

    Args:
        path: File path, or `-` for stdin.

    Returns:
        int: Process exit code, 1 when the submission is rejected.

    Raises:
        OSError: Raised when the file cannot be read.
    """

    if path == "-":
        raw_text = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as source_file:
            raw_text = source_file.read()

    outcome = domain_fxql_parse(raw_text)
    if isinstance(outcome, ParseFailure):
        print(json.dumps({"message": outcome.messages(), "code": FXQL_CODE_INVALID_INPUT}, indent=2))
        return 1

    payload = {
        "message": FXQL_SUCCESS_MESSAGE,
        "code": FXQL_CODE_SUCCESS,
        "data": [api_serialize_transaction_record(record) for record in outcome.records],
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    main()
