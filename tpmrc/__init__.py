#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPMRC - TPM 2.0 response code decoder.

Translates the raw 32-bit response code returned by a TPM 2.0 module into a
structured error value following the "Response Code Evaluation" chart from
Part 1 of the TPM 2.0 library specification.

Available as:
    - Python library (``tpmrc.tpm2``) for command layers
    - ``tpmrc`` command line tool for decoding codes by hand
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as tpmrc_version


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version: Version = parse(tpmrc_version)

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)
__release__ = "beta"


# The TPMRC behavior settings
TPMRC_VERSION_BASE = version.base_version
TPMRC_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="tpmrc",
    version=TPMRC_VERSION_BASE,
)

TPMRC_DEBUG = value_to_bool(os.environ.get("TPMRC_DEBUG"))

TPMRC_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("TPMRC_DEBUG_LOGGING_DISABLED"))
TPMRC_DEBUG_LOG_FILE = os.environ.get(
    "TPMRC_DEBUG_LOG_FILE", os.path.join(TPMRC_PLATFORM_DIRS.user_log_dir, "debug.log")
)

# Locations searched for an optional logging.yaml configuration
TPMRC_LOGGING_CONFIG_PATHS = [os.getcwd(), os.path.expanduser("~/.tpmrc")]
