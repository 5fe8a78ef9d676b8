#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPM 2.0 response code decoding.

The raw response code of a TPM 2.0 command is turned into one of the
``Tpm2Error`` subclasses by :func:`decode_response`; ``None`` stands for success.
"""

from tpmrc.tpm2.constants import RC_SUCCESS, RcIndex
from tpmrc.tpm2.decoder import check_response, decode_response
from tpmrc.tpm2.error_codes import UNKNOWN_CODE, Fmt0Code, Fmt1Code, WarningCode
from tpmrc.tpm2.exceptions import (
    Tpm2Error,
    Tpm2GeneralError,
    Tpm2HandleError,
    Tpm2LegacyError,
    Tpm2ParameterError,
    Tpm2ScopedError,
    Tpm2SessionError,
    Tpm2VendorError,
    Tpm2Warning,
)

__all__ = [
    "RC_SUCCESS",
    "RcIndex",
    "check_response",
    "decode_response",
    "UNKNOWN_CODE",
    "Fmt0Code",
    "Fmt1Code",
    "WarningCode",
    "Tpm2Error",
    "Tpm2GeneralError",
    "Tpm2HandleError",
    "Tpm2LegacyError",
    "Tpm2ParameterError",
    "Tpm2ScopedError",
    "Tpm2SessionError",
    "Tpm2VendorError",
    "Tpm2Warning",
]
