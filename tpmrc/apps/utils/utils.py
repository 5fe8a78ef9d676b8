#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPMRC application utilities.

Common click parameter types and error handling used by the TPMRC command
line applications.
"""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from tpmrc import TPMRC_DEBUG_LOG_FILE, TPMRC_DEBUG_LOGGING_DISABLED
from tpmrc.exceptions import TPMRCError
from tpmrc.utils.misc import value_to_int

logger = logging.getLogger(__name__)


class TPMRCAppError(TPMRCError):
    """TPMRC application error exception for CLI tools.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


class INT(click.ParamType):
    """Click parameter type for integers in any common notation.

    Accepts binary (0b), octal (0o), decimal and hexadecimal (0x) values with
    optional underscore separators, e.g. ``0x0000_0921``.

    :cvar name: Parameter type name used by Click framework.
    """

    name = "integer"

    # pylint: disable=inconsistent-return-statements
    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Perform the conversion str -> int.

        :param value: value to convert
        :param param: Click parameter, defaults to None
        :param ctx: Click context, defaults to None
        :return: value as integer
        """
        try:
            return value_to_int(value)
        except TPMRCError:
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def catch_tpmrc_error(function: Callable) -> Callable:
    """Catch and handle TPMRCError and other exceptions.

    ``TPMRCAppError`` exits with its own error code, other ``TPMRCError``
    exceptions with code 2 and everything else with code 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except TPMRCAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, TPMRCError) as tpmrc_exc:
            click.echo(f"{tpmrc_exc.__class__.__name__}: {tpmrc_exc}", err=True)
            logger.debug(str(tpmrc_exc), exc_info=True)
            if not TPMRC_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {TPMRC_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not TPMRC_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {TPMRC_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
