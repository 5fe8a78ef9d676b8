#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Decoder of TPM 2.0 response codes.

Logic follows the "Response Code Evaluation" chart in Part 1 of the TPM 2.0
library specification.
"""

import logging
from typing import Optional

from tpmrc.tpm2.constants import (
    RC_FMT0_CODE_MASK,
    RC_FMT1,
    RC_FMT1_CODE_MASK,
    RC_HANDLE_INDEX_MASK,
    RC_INDEX_SHIFT,
    RC_MASK,
    RC_PARAMETER,
    RC_PARAMETER_INDEX_MASK,
    RC_SESSION,
    RC_SUCCESS,
    RC_VENDOR,
    RC_VER1_MASK,
    RC_WARN,
)
from tpmrc.tpm2.exceptions import (
    Tpm2Error,
    Tpm2GeneralError,
    Tpm2HandleError,
    Tpm2LegacyError,
    Tpm2ParameterError,
    Tpm2SessionError,
    Tpm2VendorError,
    Tpm2Warning,
)

logger = logging.getLogger(__name__)


def decode_response(code: int) -> Optional[Tpm2Error]:
    """Decode a TPM 2.0 response code.

    Only the low 32 bits of ``code`` are considered.

    :param code: Response code returned by the TPM.
    :return: Decoded error, None for success.
    """
    code &= RC_MASK
    if code == RC_SUCCESS:
        return None
    error = _decode(code)
    logger.debug(f"Response code 0x{code:08X} decoded as {error!r}")
    return error


def _decode(code: int) -> Tpm2Error:
    if code & RC_VER1_MASK == 0:  # Bits 7:8 == 0 is a TPM1 error
        return Tpm2LegacyError(code)
    if code & RC_FMT1 == 0:  # Bit 7 unset
        if code & RC_VENDOR:  # Bit 10 set, vendor specific code
            return Tpm2VendorError(code)
        if code & RC_WARN:  # Bit 11 set, warning with code in bit 0:6
            return Tpm2Warning(code & RC_FMT0_CODE_MASK, code)
        # error with code in bit 0:6
        return Tpm2GeneralError(code & RC_FMT0_CODE_MASK, code)
    if code & RC_PARAMETER:  # Bit 6 set, code in 0:5, parameter number in 8:11
        return Tpm2ParameterError(
            code & RC_FMT1_CODE_MASK, (code & RC_PARAMETER_INDEX_MASK) >> RC_INDEX_SHIFT, code
        )
    if code & RC_SESSION == 0:  # Bit 11 unset, code in 0:5, handle in 8:10
        return Tpm2HandleError(
            code & RC_FMT1_CODE_MASK, (code & RC_HANDLE_INDEX_MASK) >> RC_INDEX_SHIFT, code
        )
    # Code in 0:5, session in 8:10
    return Tpm2SessionError(
        code & RC_FMT1_CODE_MASK, (code & RC_HANDLE_INDEX_MASK) >> RC_INDEX_SHIFT, code
    )


def check_response(code: int, command: Optional[str] = None) -> None:
    """Raise the decoded error if the response code is not a success.

    :param code: Response code returned by the TPM.
    :param command: Name of the command that produced the response, used for logging.
    :raises Tpm2Error: Response code is not a success.
    """
    error = decode_response(code)
    if error is None:
        return
    error.command = command
    if command:
        logger.debug(f"{command} failed: {error}")
    raise error
