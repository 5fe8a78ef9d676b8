#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
import os
from typing import Any, Callable, Optional, TypeVar, Union

import click

from tpmrc import __version__ as tpmrc_version

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def tpmrc_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(tpmrc_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def tpmrc_output_option(
    required: bool = False,
    force: bool = False,
    help: Optional[str] = None,  # pylint: disable=redefined-builtin
) -> Callable:
    """Click decorator handling on output file.

    Provides: `output: str` a full path to file.
    The force option is not passed to click command.

    :param required: Output option is required, defaults to False
    :param force: Include --force option, defaults to False
    :param help: Customized help message, defaults to None
    :return: Click decorator
    """

    def callback(
        ctx: click.Context,
        param: click.Parameter,  # pylint: disable=unused-argument  # click's callback signature
        value: Optional[str],
    ) -> Optional[str]:
        if ctx.resilient_parsing:
            return value
        if force and value and os.path.exists(value) and not ctx.params["force"]:
            click.echo(
                "Output file already exists. "
                "Please use --force is you want to overwrite existing files."
            )
            ctx.abort()
        if "force" in ctx.params:
            del ctx.params["force"]
        return value

    def decorator(func: Callable[[FC], FC]) -> Callable[[FC], FC]:
        if force:
            func = click.option(
                "--force",
                default=False,
                is_flag=True,
                help="Force overwriting of existing files.",
                is_eager=True,
            )(func)
        func = click.option(
            "-o",
            "--output",
            type=click.Path(dir_okay=False, resolve_path=True),
            required=required,
            callback=callback,
            help=help or "Path to a file, where to store the output.",
        )(func)
        return func

    return decorator
