#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Decoded TPM 2.0 response codes.

Every non-success response code decodes into exactly one of the classes below.
They are exceptions so a command layer can raise them directly, but they are
also plain immutable values. Equality and hashing look at the variant, the
narrow code and the slot only, so an error decoded from a response code equals
the same error built by hand. The complete response code is kept in ``status``
for logging and structured output.
"""

from typing import Any, Optional, Type, Union

from tpmrc.exceptions import TPMRCError
from tpmrc.tpm2.constants import RcIndex
from tpmrc.tpm2.error_codes import UNKNOWN_CODE, Fmt0Code, Fmt1Code, WarningCode
from tpmrc.utils.rc_enum import RcEnum


def _to_tag(value: Union[int, RcEnum]) -> int:
    return value.tag if isinstance(value, RcEnum) else value


########################################################################################################################
# TPM 2.0 response code errors
########################################################################################################################


class Tpm2Error(TPMRCError):
    """Base class of all decoded TPM 2.0 response codes.

    :cvar fmt: Rendering template, formatted with ``code``, ``status``,
        ``description`` and (for scoped errors) ``slot``.
    :cvar table: Message table the narrow code indexes, None if codes are not looked up.
    :cvar kind: Short name of the variant, used in structured output.
    """

    fmt = "error code 0x{code:x} : {description}"
    table: Optional[Type[RcEnum]] = None
    kind = "error"

    def __init__(self, code: Union[int, RcEnum], status: Optional[int] = None) -> None:
        """Initialize the decoded error.

        :param code: Narrow code carried by this variant, a number or a message table member.
        :param status: Complete response code the error was decoded from, defaults to ``code``.
        """
        super().__init__()
        self.code = _to_tag(code)
        self.status = self.code if status is None else status
        self.command: Optional[str] = None
        self.description = self.describe()

    @property
    def member(self) -> Optional[RcEnum]:
        """Message table member of the code, None for codes missing in the table."""
        if self.table is None:
            return None
        return self.table.find_tag(self.code)

    def describe(self) -> str:
        """Look up the description of the code.

        :return: Description from the message table or ``UNKNOWN_CODE``.
        """
        member = self.member
        if member is None or not member.description:
            return UNKNOWN_CODE
        return member.description

    def _fmt_params(self) -> dict[str, Any]:
        return {"code": self.code, "status": self.status, "description": self.description}

    def render(self) -> str:
        """Render the error into a human-readable, log-friendly string.

        :return: Rendered error message.
        """
        return self.fmt.format(**self._fmt_params())

    def to_dict(self) -> dict[str, Any]:
        """Get the decoded error as a plain dictionary.

        :return: Dictionary with kind, raw status, code and description.
        """
        result: dict[str, Any] = {"kind": self.kind, "status": self.status, "code": self.code}
        if self.table is not None:
            result["description"] = self.description
        return result

    def _key(self) -> tuple:
        return (self.code,)

    def _init_args(self) -> tuple:
        return (self.code, self.status)

    def __reduce__(self) -> tuple:
        return (self.__class__, self._init_args(), {"command": self.command})

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code:#x}, status={self.status:#x})"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._key() == other._key()  # type: ignore

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class Tpm2LegacyError(Tpm2Error):
    """TPM 1.2 style response code, bits 7:8 are zero.

    These are not decoded any further, the code is the complete response code.
    """

    fmt = "response status 0x{status:x}"
    kind = "legacy"

    def __init__(self, status: int) -> None:
        """Initialize the legacy error.

        :param status: Complete response code.
        """
        super().__init__(status, status)

    def _init_args(self) -> tuple:
        return (self.status,)


class Tpm2GeneralError(Tpm2Error):
    """Format-zero error, a general error not specific to a parameter, handle or session."""

    table = Fmt0Code
    kind = "error"


class Tpm2VendorError(Tpm2Error):
    """Vendor specific response code.

    Vendor layouts are not specified, so the code is the complete response code
    and no description is looked up.
    """

    fmt = "vendor error code 0x{code:x}"
    kind = "vendor"

    def __init__(self, status: int) -> None:
        """Initialize the vendor error.

        :param status: Complete response code.
        """
        super().__init__(status, status)

    def _init_args(self) -> tuple:
        return (self.status,)


class Tpm2Warning(Tpm2Error):
    """Format-zero warning, typically used to report transient errors."""

    fmt = "warning code 0x{code:x} : {description}"
    table = WarningCode
    kind = "warning"


class Tpm2ScopedError(Tpm2Error):
    """Format-one error tied to a parameter, handle or session of the command.

    :cvar slot_name: Name of the command field the slot index refers to.
    """

    fmt = "{slot_name} {slot}, error code 0x{code:x} : {description}"
    table = Fmt1Code
    slot_name = "slot"

    def __init__(
        self, code: Union[int, RcEnum], slot: Union[int, RcIndex], status: Optional[int] = None
    ) -> None:
        """Initialize the scoped error.

        :param code: Format-one code, a number or a ``Fmt1Code`` member.
        :param slot: One-based index of the parameter, handle or session, a number or an ``RcIndex`` member.
        :param status: Complete response code the error was decoded from.
        """
        self.slot = _to_tag(slot)
        super().__init__(code, status)

    @property
    def index(self) -> Optional[RcIndex]:
        """Slot as ``RcIndex`` member, None for slot zero."""
        return RcIndex.find_tag(self.slot)

    def _fmt_params(self) -> dict[str, Any]:
        params = super()._fmt_params()
        params.update(slot=self.slot, slot_name=self.slot_name)
        return params

    def to_dict(self) -> dict[str, Any]:
        """Get the decoded error as a plain dictionary.

        :return: Dictionary with kind, raw status, code, slot and description.
        """
        result = super().to_dict()
        result[self.slot_name] = self.slot
        return result

    def _key(self) -> tuple:
        return super()._key() + (self.slot,)

    def _init_args(self) -> tuple:
        return (self.code, self.slot, self.status)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(code={self.code:#x}, "
            f"{self.slot_name}={self.slot}, status={self.status:#x})"
        )


class Tpm2ParameterError(Tpm2ScopedError):
    """Error related to a command parameter, carries the parameter number."""

    slot_name = "parameter"
    kind = "parameter"

    @property
    def parameter(self) -> int:
        """Number of the parameter."""
        return self.slot


class Tpm2HandleError(Tpm2ScopedError):
    """Error related to a command handle, carries the handle number."""

    slot_name = "handle"
    kind = "handle"

    @property
    def handle(self) -> int:
        """Number of the handle."""
        return self.slot


class Tpm2SessionError(Tpm2ScopedError):
    """Error related to an authorization session, carries the session number."""

    slot_name = "session"
    kind = "session"

    @property
    def session(self) -> int:
        """Number of the session."""
        return self.slot
