#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the tpmrc command line tool."""

import json
import os

from tests.cli_runner import CliRunner
from tpmrc import __version__
from tpmrc.apps import tpmrc
from tpmrc.tpm2.error_codes import Fmt1Code, WarningCode


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["--version"])
    assert __version__ in result.output


def test_decode(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["decode", "0x98E", "0", "2338"])
    lines = result.output.splitlines()
    assert lines == [
        "0x0000098E: session 1, error code 0xe : "
        "the authorization HMAC check failed and DA counter incremented",
        "0x00000000: success",
        "0x00000922: warning code 0x22 : the TPM was not able to start the command",
    ]


def test_decode_vendor(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["decode", "0xFFFF_FD7F"])
    assert result.output.strip() == "0xFFFFFD7F: vendor error code 0xfffffd7f"


def test_decode_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["decode", "--json", "0x1C4", "0x0", "0x500"])
    data = json.loads(result.stdout)
    assert data == [
        {
            "kind": "parameter",
            "status": 0x1C4,
            "code": 0x04,
            "description": Fmt1Code.VALUE.description,
            "parameter": 1,
        },
        {"kind": "success", "status": 0},
        {"kind": "vendor", "status": 0x500, "code": 0x500},
    ]


def test_decode_output(cli_runner: CliRunner, tmpdir) -> None:
    output = os.path.join(tmpdir, "result.txt")
    cli_runner.invoke(tpmrc.main, ["decode", "0x18B", "-o", output])
    with open(output, encoding="utf-8") as f:
        assert f.read() == (
            "0x0000018B: handle 1, error code 0xb : the handle is not correct for the use\n"
        )
    # existing file is protected unless --force is used
    cli_runner.invoke(tpmrc.main, ["decode", "0x18B", "-o", output], expected_code=1)
    cli_runner.invoke(tpmrc.main, ["decode", "0x922", "-o", output, "--force"])
    with open(output, encoding="utf-8") as f:
        assert f.read().startswith("0x00000922: warning code 0x22")


def test_decode_out_of_range(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["decode", "0x1_0000_0000"], expected_code=1)
    assert isinstance(result.exception, tpmrc.TPMRCAppError)


def test_decode_invalid_number(cli_runner: CliRunner) -> None:
    cli_runner.invoke(tpmrc.main, ["decode", "0xZZ"], expected_code=2)


def test_decode_negative_number(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["decode", "-5"], expected_code=2)
    assert not isinstance(result.exception, tpmrc.TPMRCAppError)
    cli_runner.invoke(tpmrc.main, ["decode", "--", "-0x5"], expected_code=2)


def test_table_default(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["table"])
    lines = result.output.splitlines()
    assert len(lines) == 34
    assert lines[0].startswith("0x00  TPM_RC_INITIALIZE")


def test_table_warning(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["table", "warning"])
    lines = result.output.splitlines()
    assert len(lines) == len(WarningCode)
    assert any(
        line.startswith("0x22  TPM_RC_RETRY") and line.endswith(WarningCode.RETRY.description)
        for line in lines
    )


def test_table_index(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(tpmrc.main, ["table", "INDEX"])
    assert result.output.splitlines()[-1].startswith("0x0F  TPM_RC_F")


def test_format_response() -> None:
    assert tpmrc.format_response(0) == "0x00000000: success"
    assert tpmrc.format_response(0x001) == "0x00000001: response status 0x1"
