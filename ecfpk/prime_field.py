#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field F_p.

Integer residues mod p, always normalized into [0, p).
"""

from dataclasses import InitVar, dataclass

from dataclasses_json import DataClassJsonMixin

from ecfpk.exceptions import ECFpkValueError
from ecfpk.number_theory import is_probable_prime, mod_inv
from ecfpk.utils import int_repr


@dataclass(frozen=True)
class PrimeField(DataClassJsonMixin):
    """Prime field F_p.

    Inputs are assumed to be integers;
    results are always reduced into [0, p).
    """

    p: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not is_probable_prime(self.p):
            raise ECFpkValueError(f"p is not prime: {int_repr(self.p)}")

    def __str__(self) -> str:
        return f"F_{int_repr(self.p)}"

    def add(self, x: int, y: int) -> int:
        return (x + y) % self.p

    def sub(self, x: int, y: int) -> int:
        # Python % is never negative for a positive modulus
        return (x - y) % self.p

    def mul(self, x: int, y: int) -> int:
        return (x * y) % self.p

    def neg(self, x: int) -> int:
        return -x % self.p

    def inv(self, x: int) -> int:
        """Return the inverse of x, computed with the Extended Euclidean Algorithm.

        NotInvertibleError is raised if x is zero mod p.
        """
        return mod_inv(x, self.p)

    mod_inverse = inv

    def pow(self, x: int, e: int) -> int:
        if e < 0:
            return pow(self.inv(x), -e, self.p)
        return pow(x, e, self.p)
