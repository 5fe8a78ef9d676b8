#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPM 2.0 response code decoding tool."""

import json
import logging
import sys
from typing import Optional, Type

import click

from tpmrc.apps.utils import tpmrc_logger
from tpmrc.apps.utils.common_cli_options import tpmrc_apps_common_options, tpmrc_output_option
from tpmrc.apps.utils.utils import INT, TPMRCAppError, catch_tpmrc_error
from tpmrc.tpm2.constants import RcIndex
from tpmrc.tpm2.decoder import decode_response
from tpmrc.tpm2.error_codes import Fmt0Code, Fmt1Code, WarningCode
from tpmrc.utils.misc import check_range, write_file
from tpmrc.utils.rc_enum import RcEnum

logger = logging.getLogger(__name__)

TABLES: dict[str, Type[RcEnum]] = {
    "general": Fmt0Code,
    "format1": Fmt1Code,
    "warning": WarningCode,
    "index": RcIndex,
}


def format_response(code: int) -> str:
    """Format one decoded response code as a line of text.

    :param code: Response code.
    :return: Line with the response code and its rendering.
    """
    error = decode_response(code)
    return f"0x{code:08X}: {'success' if error is None else error.render()}"


def response_to_dict(code: int) -> dict:
    """Get one decoded response code as a dictionary.

    :param code: Response code.
    :return: Dictionary with the decoded response code.
    """
    error = decode_response(code)
    if error is None:
        return {"kind": "success", "status": code}
    return error.to_dict()


def format_table(table: Type[RcEnum]) -> str:
    """Format all members of a message table.

    :param table: Message table.
    :return: One line per member with code, label and description.
    """
    return "\n".join(
        f"0x{member.tag:02X}  {member.label:<26}{member.description or ''}" for member in table
    )


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        write_file(text + "\n", output)
        click.echo(f"Result has been stored in: {output}")
    else:
        click.echo(text)


@click.group(name="tpmrc", no_args_is_help=True)
@tpmrc_apps_common_options
def main(log_level: int) -> None:
    """Utility for decoding TPM 2.0 response codes."""
    tpmrc_logger.install(level=log_level)


@main.command(name="decode", no_args_is_help=True)
@click.argument("codes", type=INT(), nargs=-1, required=True)
@click.option("-j", "--json", "use_json", is_flag=True, default=False, help="Print JSON output.")
@tpmrc_output_option(force=True)
def decode(codes: tuple[int, ...], use_json: bool, output: Optional[str]) -> None:
    """Decode one or more TPM 2.0 response codes.

    CODES are accepted in any notation, e.g. 0x921, 2337 or 0b100100100001.
    """
    for code in codes:
        if not check_range(code):
            raise TPMRCAppError(f"Response code {code:#x} doesn't fit into 32 bits")
    logger.info(f"Decoding {len(codes)} response code(s)")
    if use_json:
        text = json.dumps([response_to_dict(code) for code in codes], indent=2)
    else:
        text = "\n".join(format_response(code) for code in codes)
    _emit(text, output)


@main.command(name="table")
@click.argument(
    "table", type=click.Choice(list(TABLES), case_sensitive=False), default="general"
)
@tpmrc_output_option(force=True)
def table_command(table: str, output: Optional[str]) -> None:
    """List the entries of a response code message table.

    TABLE is one of: general (format-zero errors, default), format1 (format-one
    errors), warning or index (parameter, handle and session indexes).
    """
    _emit(format_table(TABLES[table]), output)


@catch_tpmrc_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
