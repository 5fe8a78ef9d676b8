#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPMRC exception classes.

This module defines the base exception hierarchy used throughout the TPMRC
library. TPM response codes themselves are modelled in ``tpmrc.tpm2.exceptions``
on top of these classes.
"""

from typing import Optional

#######################################################################
# # TPMRC Exceptions
#######################################################################


class TPMRCError(Exception):
    """TPMRC Base Exception.

    Base exception class for all TPMRC-related errors. Provides consistent error
    formatting through the ``fmt`` template.

    :cvar fmt: Default error message format template.
    """

    fmt = "TPMRC: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base TPMRC Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class TPMRCValueError(TPMRCError, ValueError):
    """TPMRC standard value error exception."""


class TPMRCIOError(TPMRCError, IOError):
    """TPMRC standard IO error exception.

    Raised when configuration or output files can't be read or written.
    """
