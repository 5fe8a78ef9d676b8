#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the TPM 2.0 response code decoder.

Every branch of the response code evaluation chart is covered with concrete
response codes, the expected fields are computed by hand from the bit layout.
"""

import random
from typing import Optional, Type

import pytest

from tpmrc.tpm2.decoder import check_response, decode_response
from tpmrc.tpm2.error_codes import Fmt0Code, Fmt1Code, WarningCode
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


def test_success() -> None:
    assert decode_response(0x000) is None
    assert decode_response(0x1_0000_0000) is None


@pytest.mark.parametrize(
    "status",
    [0x001, 0x07F, 0x400, 0x800, 0xE00, 0xE7F, 0x1234_0001],
)
def test_legacy(status: int) -> None:
    """Bits 7:8 clear, the code is not decoded any further."""
    error = decode_response(status)
    assert isinstance(error, Tpm2LegacyError)
    assert error.code == status
    assert error.status == status
    assert str(error) == f"response status 0x{status:x}"


@pytest.mark.parametrize(
    "status",
    [0x500, 0x501, 0xD01, 0x57F, 0xFFFF_FD7F],
)
def test_vendor(status: int) -> None:
    """Bit 7 clear, bit 10 set, the vendor error keeps the complete code."""
    error = decode_response(status)
    assert isinstance(error, Tpm2VendorError)
    assert error.code == status
    assert error.status == status
    assert str(error) == f"vendor error code 0x{status:x}"


@pytest.mark.parametrize(
    "status,code",
    [
        (0x901, WarningCode.CONTEXT_GAP),
        (0x908, WarningCode.YIELDED),
        (0x90A, WarningCode.TESTING),
        (0x921, WarningCode.LOCKOUT),
        (0x922, WarningCode.RETRY),
        (0x923, WarningCode.NV_UNAVAILABLE),
        (0xB22, WarningCode.RETRY),
        (0x97F, 0x7F),
    ],
)
def test_warning(status: int, code: int) -> None:
    """Bit 7 clear, bit 10 clear, bit 11 set, code in bits 0:6."""
    error = decode_response(status)
    assert isinstance(error, Tpm2Warning)
    assert error.code == code
    assert error.status == status


@pytest.mark.parametrize(
    "status,code",
    [
        (0x100, Fmt0Code.INITIALIZE),
        (0x101, Fmt0Code.FAILURE),
        (0x143, Fmt0Code.COMMAND_CODE),
        (0x155, Fmt0Code.SENSITIVE),
        (0x300, Fmt0Code.INITIALIZE),
        (0x102, 0x02),
        (0x17F, 0x7F),
    ],
)
def test_general_error(status: int, code: int) -> None:
    """Bit 7 clear, bits 10 and 11 clear, code in bits 0:6."""
    error = decode_response(status)
    assert isinstance(error, Tpm2GeneralError)
    assert error.code == code
    assert error.status == status


@pytest.mark.parametrize(
    "status,code,slot",
    [
        (0x1C4, Fmt1Code.VALUE, 1),
        (0x2D5, Fmt1Code.SIZE, 2),
        (0x5C3, Fmt1Code.HASH, 5),
        (0x9D5, Fmt1Code.SIZE, 9),
        (0xFC1, Fmt1Code.ASYMMETRIC, 15),
        (0x0C0, 0x00, 0),
    ],
)
def test_parameter_error(status: int, code: int, slot: int) -> None:
    """Bits 7 and 6 set, code in bits 0:5, parameter in bits 8:11."""
    error = decode_response(status)
    assert isinstance(error, Tpm2ParameterError)
    assert error.code == code
    assert error.slot == slot
    assert error.parameter == slot


@pytest.mark.parametrize(
    "status,code,slot",
    [
        (0x18B, Fmt1Code.HANDLE, 1),
        (0x284, Fmt1Code.VALUE, 2),
        (0x78B, Fmt1Code.HANDLE, 7),
        (0x08B, Fmt1Code.HANDLE, 0),
    ],
)
def test_handle_error(status: int, code: int, slot: int) -> None:
    """Bit 7 set, bits 6 and 11 clear, code in bits 0:5, handle in bits 8:10."""
    error = decode_response(status)
    assert isinstance(error, Tpm2HandleError)
    assert error.code == code
    assert error.slot == slot
    assert error.handle == slot


@pytest.mark.parametrize(
    "status,code,slot",
    [
        (0x98E, Fmt1Code.AUTH_FAIL, 1),
        (0x9A2, Fmt1Code.BAD_AUTH, 1),
        (0xA8E, Fmt1Code.AUTH_FAIL, 2),
        (0xF8B, Fmt1Code.HANDLE, 7),
        (0x886, 0x06, 0),
    ],
)
def test_session_error(status: int, code: int, slot: int) -> None:
    """Bit 7 set, bit 6 clear, bit 11 set, code in bits 0:5, session in bits 8:10."""
    error = decode_response(status)
    assert isinstance(error, Tpm2SessionError)
    assert error.code == code
    assert error.slot == slot
    assert error.session == slot


def test_slot_windows() -> None:
    """Parameter numbers use four bits, handle and session numbers only three."""
    parameter = decode_response(0xFC4)
    session = decode_response(0xF84)
    handle = decode_response(0x784)
    assert isinstance(parameter, Tpm2ParameterError) and parameter.slot == 0xF
    assert isinstance(session, Tpm2SessionError) and session.slot == 0x7
    assert isinstance(handle, Tpm2HandleError) and handle.slot == 0x7


@pytest.mark.parametrize(
    "status,expected",
    [
        (0x100, "error code 0x0 : TPM not initialized by TPM2_Startup or already initialized"),
        (0x10B, "error code 0xb : not currently used"),
        (0x102, "error code 0x2 : unknown error code"),
        (0x922, "warning code 0x22 : the TPM was not able to start the command"),
        (0x90F, "warning code 0xf : unknown error code"),
        (0x500, "vendor error code 0x500"),
        (
            0x1C4,
            "parameter 1, error code 0x4 : value is out of range or is not correct for the context",
        ),
        (0x18B, "handle 1, error code 0xb : the handle is not correct for the use"),
        (
            0x98E,
            "session 1, error code 0xe : "
            "the authorization HMAC check failed and DA counter incremented",
        ),
        (0x886, "session 0, error code 0x6 : unknown error code"),
        (0x001, "response status 0x1"),
    ],
)
def test_render(status: int, expected: str) -> None:
    error = decode_response(status)
    assert error is not None
    assert error.render() == expected
    assert str(error) == expected


def test_totality() -> None:
    """Every 32-bit value decodes into exactly one variant, only zero is a success."""
    rng = random.Random(0x7B3)
    statuses = list(range(0x1000)) + [rng.getrandbits(32) for _ in range(2000)]
    leaf_types: tuple[Type[Tpm2Error], ...] = (
        Tpm2LegacyError,
        Tpm2VendorError,
        Tpm2Warning,
        Tpm2GeneralError,
        Tpm2ParameterError,
        Tpm2HandleError,
        Tpm2SessionError,
    )
    for status in statuses:
        error = decode_response(status)
        if status == 0:
            assert error is None
            continue
        assert error is not None
        assert sum(isinstance(error, leaf) for leaf in leaf_types) == 1
        assert str(error)


def test_idempotence() -> None:
    rng = random.Random(0x921)
    for status in [rng.getrandbits(32) for _ in range(500)]:
        first: Optional[Tpm2Error] = decode_response(status)
        second = decode_response(status)
        assert first == second
        assert hash(first) == hash(second)


def test_narrow_code_discards_consumed_bits() -> None:
    for status in (0x98E, 0x1C4, 0x18B):
        error = decode_response(status)
        assert isinstance(error, Tpm2ScopedError)
        assert error.code == status & 0x3F
    for status in (0x922, 0x143):
        error = decode_response(status)
        assert error is not None
        assert error.code == status & 0x7F


def test_check_response_success() -> None:
    assert check_response(0) is None


def test_check_response_raises() -> None:
    with pytest.raises(Tpm2Warning) as exc_info:
        check_response(0x922, command="TPM2_Unseal")
    assert exc_info.value.code == WarningCode.RETRY
    assert exc_info.value.command == "TPM2_Unseal"
    assert str(exc_info.value) == "warning code 0x22 : the TPM was not able to start the command"


def test_check_response_without_command() -> None:
    with pytest.raises(Tpm2HandleError) as exc_info:
        check_response(0x18B)
    assert exc_info.value.command is None
