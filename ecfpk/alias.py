#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import TYPE_CHECKING, Sequence, Tuple, Union

if TYPE_CHECKING:
    from ecfpk.field import FieldElement

# Polynomials over F_p and field element coordinates
# are coefficient sequences, lowest degree first:
# [3, 2] is 3 + 2t, [1, 0, 4] is 1 + 4t^2
#
# Polynomials are trimmed (no trailing zero coefficients,
# the zero polynomial being []),
# while field element coordinates have fixed length k
Coefficients = Sequence[int]


class Infinity:
    """The point at infinity, i.e. the group identity.

    It is not an affine coordinate pair:
    in an extension field the y=0 coordinate is taken
    by the points of order two, so (int, 0) cannot be used.
    Use the INF singleton.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Infinity)

    def __hash__(self) -> int:
        return hash("INF")

    def __repr__(self) -> str:
        return "INF"

    def __reduce__(self) -> str:
        return "INF"


INF = Infinity()

# Elliptic curve point in affine coordinates.
AffinePoint = Tuple["FieldElement", "FieldElement"]

# It can be checked with 'Q == INF' or 'isinstance(Q, Infinity)'
Point = Union[AffinePoint, Infinity]

# field element inputs: a FieldElement, an integer constant,
# or the sequence of the k element coefficients
FieldElementLike = Union["FieldElement", int, Coefficients]
