# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token reader and writer for competitive-programming input files."""

from cplib.io.kinds import (
    CHAR,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    LONG_LONG,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UNSIGNED,
    UNSIGNED_LONG_LONG,
    CharKind,
    IntKind,
)
from cplib.io.reader import Reader
from cplib.io.scanner import SourceCursor, is_digit, is_space
from cplib.io.writer import Writer

__all__ = [
    "CHAR",
    "CharKind",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "IntKind",
    "LONG_LONG",
    "Reader",
    "SourceCursor",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UNSIGNED",
    "UNSIGNED_LONG_LONG",
    "Writer",
    "is_digit",
    "is_space",
]
