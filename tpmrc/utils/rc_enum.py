#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""TPMRC enumeration with tag, label and description members.

Every TPM response code table is an ``RcEnum``: a member carries the numeric
tag used on the wire, the identifier used by the TPM 2.0 specification and a
human-readable description.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from typing_extensions import Self


@dataclass(frozen=True)
class RcEnumMember:
    """TPMRC Enum member representation.

    Represents a single member of a TPMRC enumeration, containing the numeric
    tag, specification label and optional description.
    """

    tag: int
    label: str
    description: Optional[str] = None


class RcEnum(RcEnumMember, Enum):
    """TPMRC enumeration with tag-based lookup.

    Members compare equal to their tag as well as to their label, so a decoded
    narrow code can be matched directly against a table member.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        """Calculate hash value for the enum instance.

        :return: Hash value as integer.
        """
        return hash((self.tag, self.label, self.description))

    @classmethod
    def find_tag(cls, tag: int) -> Optional[Self]:
        """Get enum member with given tag, if there is one.

        :param tag: Tag to be used for searching.
        :return: Found enum member or None.
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        return None

