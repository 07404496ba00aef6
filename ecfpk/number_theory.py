#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Implementations originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* probabilistic primality test
"""

from typing import Tuple

from ecfpk.exceptions import NotInvertibleError
from ecfpk.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    The Bezout coefficient of a, as provided by the
    Extended Euclidean Algorithm, is reduced into [0, m).
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NotInvertibleError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")


def is_probable_prime(p: int) -> bool:
    """Return True if p passes the base-2 Fermat test.

    2 is accepted, while other even numbers are rejected.
    Fermat test will do as _probabilistic_ primality test:
    pseudoprimes (e.g. 341) are not detected.
    """

    if p == 2:
        return True
    return not (p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1)
