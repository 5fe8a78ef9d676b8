#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Bit layout of TPM 2.0 response codes.

Values follow the "Response Code Evaluation" chart and the TPM_RC definition in
Part 1 and Part 2 of the TPM 2.0 library specification.
"""

from tpmrc.utils.rc_enum import RcEnum

RC_SUCCESS = 0x000

# Response code word size
RC_MASK = 0xFFFF_FFFF

# Bits 7:8 equal to zero mean a TPM 1.2 response code
RC_VER1_MASK = 0x180

# Bit 7, set for format-one (parameter/handle/session) codes
RC_FMT1 = 0x080

# Format-zero flags
RC_VENDOR = 0x400  # bit 10
RC_WARN = 0x800  # bit 11
RC_FMT0_CODE_MASK = 0x07F  # bits 0:6

# Format-one flags
RC_PARAMETER = 0x040  # bit 6
RC_SESSION = 0x800  # bit 11, when bit 6 is clear
RC_FMT1_CODE_MASK = 0x03F  # bits 0:5
RC_PARAMETER_INDEX_MASK = 0xF00  # bits 8:11
RC_HANDLE_INDEX_MASK = 0x700  # bits 8:10
RC_INDEX_SHIFT = 8


# fmt: off
class RcIndex(RcEnum):
    """Indexes of parameters, handles and sessions in format-one codes."""

    RC1 = (0x01, "TPM_RC_1", "1st")
    RC2 = (0x02, "TPM_RC_2", "2nd")
    RC3 = (0x03, "TPM_RC_3", "3rd")
    RC4 = (0x04, "TPM_RC_4", "4th")
    RC5 = (0x05, "TPM_RC_5", "5th")
    RC6 = (0x06, "TPM_RC_6", "6th")
    RC7 = (0x07, "TPM_RC_7", "7th")
    RC8 = (0x08, "TPM_RC_8", "8th")
    RC9 = (0x09, "TPM_RC_9", "9th")
    RCA = (0x0A, "TPM_RC_A", "10th")
    RCB = (0x0B, "TPM_RC_B", "11th")
    RCC = (0x0C, "TPM_RC_C", "12th")
    RCD = (0x0D, "TPM_RC_D", "13th")
    RCE = (0x0E, "TPM_RC_E", "14th")
    RCF = (0x0F, "TPM_RC_F", "15th")
# fmt: on
