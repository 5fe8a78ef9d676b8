#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous functions used throughout the TPMRC."""

import json
import logging
import os
import re
from typing import Optional, Union

import yaml

from tpmrc.exceptions import TPMRCError, TPMRCIOError, TPMRCValueError

logger = logging.getLogger(__name__)


def get_abs_path(file_path: str, base_dir: Optional[str] = None) -> str:
    """Convert relative or absolute file path to normalized absolute path.

    :param file_path: File path to be converted to absolute path.
    :param base_dir: Base directory to create absolute path, if not specified the system CWD is used.
    :return: Absolute file path with normalized separators.
    """
    if os.path.isabs(file_path):
        return file_path.replace("\\", "/")

    return os.path.abspath(os.path.join(base_dir or os.getcwd(), file_path)).replace("\\", "/")


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem.

    Search paths take precedence over current working directory when both are enabled.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file or empty string if not found and raise_exc is False.
    :raises TPMRCError: File not found in any of the search locations.
    """
    file_path = file_path.replace("\\", "/")

    if os.path.isabs(file_path):
        if os.path.isfile(file_path):
            return file_path
        if raise_exc:
            raise TPMRCError(f"Path '{file_path}' not found")
        return ""
    for dir_candidate in search_paths or []:
        if not dir_candidate:
            continue
        path_candidate = get_abs_path(file_path, base_dir=dir_candidate.replace("\\", "/"))
        if os.path.isfile(path_candidate):
            return path_candidate
    if use_cwd and os.path.isfile(file_path):
        return get_abs_path(file_path)

    searched_in: list[str] = []
    if use_cwd:
        searched_in.append(os.path.abspath(os.curdir))
    if search_paths:
        searched_in.extend(filter(None, search_paths))
    err_str = f"Path '{file_path}' not found, Searched in: {', '.join(searched_in)}"
    if not raise_exc:
        logger.debug(err_str)
        return ""
    raise TPMRCError(err_str)


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(data: str, path: str, encoding: str = "utf-8") -> int:
    """Write text data to a file, creating missing parent directories.

    :param data: Data to write to the file.
    :param path: Path to the target file.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :raises TPMRCIOError: The file can't be written.
    :return: Number of characters written to the file.
    """
    path = path.replace("\\", "/")
    folder = os.path.dirname(path)
    try:
        if folder and not os.path.exists(folder):
            os.makedirs(folder, exist_ok=True)
        logger.debug(f"Storing text file at {path}")
        with open(path, "w", encoding=encoding) as f:
            return f.write(data)
    except OSError as exc:
        raise TPMRCIOError(f"Can't write file {path}: {str(exc)}") from exc


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    JSON is tried first, YAML is used as a fallback.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises TPMRCError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise TPMRCError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise TPMRCError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise TPMRCError(f"Invalid configuration file: {path}")

    return config_data


def value_to_int(value: Union[bytes, bytearray, int, str], default: Optional[int] = None) -> int:
    """Convert value from multiple formats to integer.

    Strings may use binary, octal, decimal or hexadecimal notation with prefixes,
    optionally followed by C-style ``u``/``l`` suffixes (e.g. ``0x921u``).

    :param value: Input value to convert (int, bytes, bytearray, or str).
    :param default: Default value returned when conversion fails.
    :return: Converted integer value.
    :raises TPMRCValueError: Unsupported input type or invalid conversion without default.
    """
    if isinstance(value, int):
        return value

    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")

    if isinstance(value, str) and value != "":
        match = re.match(
            r"(?P<prefix>0[box])?(?P<number>[0-9a-f_]+)(?P<suffix>[ul]{0,3})$",
            value.strip().lower(),
        )
        if match:
            base = {"0b": 2, "0o": 8, "0x": 16, None: 10}[match.group("prefix")]
            try:
                return int(match.group("number"), base=base)
            except ValueError:
                pass

    if default is not None:
        return default
    raise TPMRCValueError(f"Invalid input number type({type(value)}) with value ({value})")


def check_range(x: int, start: int = 0, end: int = (1 << 32) - 1) -> bool:
    """Check if the number is in range.

    :param x: Number to check.
    :param start: Lower border of range, default is 0.
    :param end: Upper border of range, default is unsigned 32-bit range.
    :return: True if fits, False otherwise.
    """
    return start <= x <= end
