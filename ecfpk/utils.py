#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted formatting utilities for error messages and renderings."""

from typing import Sequence

from ecfpk.exceptions import ECFpkValueError

HEX_THRESHOLD = 0xFFFFFFFF


def hex_string(i: int) -> str:
    """Return a hex-string from a positive integer.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    if i < 0:
        raise ECFpkValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return i as decimal string, or as quoted hex-string if large."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def str_from_coeffs(coeffs: Sequence[int], var: str = "t") -> str:
    """Return the human readable rendering of a polynomial.

    Coefficients are lowest degree first:
    [3, 2] is rendered as '3 + 2t', [0, 4] as '4t',
    [1, 0, 2] as '1 + 2t^2', and the zero polynomial as '0'.
    """

    terms = []
    for i, c in enumerate(coeffs):
        if c == 0:
            continue
        if i == 0:
            terms.append(f"{c}")
        elif i == 1:
            terms.append(f"{c}{var}")
        else:
            terms.append(f"{c}{var}^{i}")
    return " + ".join(terms) if terms else "0"
