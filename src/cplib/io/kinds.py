# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token kinds understood by the generic ``Reader.read`` dispatch.

Python integers are unbounded, so every integer read names the fixed-width
kind it must fit into. The C-style aliases match the widths validators are
usually written against.
"""

from __future__ import annotations

from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class IntKind:
    """A fixed-width two's-complement or unsigned integer type.

    Attributes:
        name: Display name used in messages.
        bits: Width in bits.
        signed: Whether negative values are representable.
    """

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def unsigned_counterpart(self) -> IntKind:
        """Return the unsigned kind with the same width."""
        if not self.signed:
            return self
        return IntKind(f"u{self.name}", self.bits, False)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min_value <= value <= self.max_value


@dataclass(frozen=True)
class CharKind:
    """Tag selecting single-character reads."""

    name: str = "char"


INT8 = IntKind("int8", 8, True)
INT16 = IntKind("int16", 16, True)
INT32 = IntKind("int32", 32, True)
INT64 = IntKind("int64", 64, True)
UINT8 = IntKind("uint8", 8, False)
UINT16 = IntKind("uint16", 16, False)
UINT32 = IntKind("uint32", 32, False)
UINT64 = IntKind("uint64", 64, False)

INT = INT32
UNSIGNED = UINT32
LONG_LONG = INT64
UNSIGNED_LONG_LONG = UINT64

CHAR = CharKind()
