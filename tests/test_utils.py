#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfpk.utils` module."

import pytest

from ecfpk.exceptions import ECFpkValueError
from ecfpk.utils import hex_string, int_repr, str_from_coeffs


def test_hex_string() -> None:
    assert hex_string(0) == "00"
    assert hex_string(255) == "FF"
    assert hex_string(0xDEADBEEF) == "DEADBEEF"
    assert hex_string(2 ** 64) == "01 00000000 00000000"

    with pytest.raises(ECFpkValueError, match="negative integer: "):
        hex_string(-1)


def test_int_repr() -> None:
    assert int_repr(5) == "5"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0xFFFFFFFF + 1) == "'01 00000000'"


def test_str_from_coeffs() -> None:
    assert str_from_coeffs([]) == "0"
    assert str_from_coeffs([0, 0]) == "0"
    assert str_from_coeffs([3, 0]) == "3"
    assert str_from_coeffs([0, 4]) == "4t"
    assert str_from_coeffs([3, 2]) == "3 + 2t"
    assert str_from_coeffs([1, 0, 2]) == "1 + 2t^2"
    assert str_from_coeffs([1, 2, 3]) == "1 + 2t + 3t^2"
    assert str_from_coeffs([0, 1], var="u") == "1u"
