#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Extension field F_p^k.

The elements of F_p^k are the polynomials over F_p of degree less than k,
i.e. the residues of F_p[t] modulo a monic reduction polynomial
of degree k. The reduction polynomial must be irreducible over F_p
for the residues to be a field: this precondition is not checked
here (see ecfpk.polynomial.is_irreducible), as a reducible
reduction polynomial is a configuration defect.
When a zero divisor is met by the inversion,
NotInvertibleError is raised reporting the reducible reduction polynomial.

Field elements are stored as fixed-length coefficient tuples,
lowest degree first: with k=2, (3, 2) is 3 + 2t.
"""

from dataclasses import InitVar, dataclass
from dataclasses import field as dataclass_field
from functools import cached_property
from itertools import product
from typing import Iterator, Sequence, Tuple, Union

from dataclasses_json import DataClassJsonMixin, config

from ecfpk.alias import Coefficients, FieldElementLike
from ecfpk.exceptions import (
    ECFpkRuntimeError,
    ECFpkTypeError,
    ECFpkValueError,
    FieldMismatchError,
    MalformedElementError,
    NotInvertibleError,
)
from ecfpk.number_theory import is_probable_prime
from ecfpk.polynomial import poly_mul, poly_scale, poly_xgcd
from ecfpk.prime_field import PrimeField
from ecfpk.utils import int_repr, str_from_coeffs


@dataclass(frozen=True)
class ExtensionField(DataClassJsonMixin):
    """Extension field F_p^k = F_p[t] / (modulus).

    The modulus is the monic reduction polynomial of degree k,
    lowest degree first: (2, 0, 1) is t^2 + 2, i.e. t^2 = 3 mod 5.

    The field is the context of its elements:
    every binary operation requires elements of the same field,
    otherwise FieldMismatchError is raised.
    """

    p: int
    modulus: Tuple[int, ...] = dataclass_field(
        metadata=config(encoder=list, decoder=tuple)
    )
    check_validity: InitVar[bool] = True

    def __init__(
        self, p: int, modulus: Coefficients, check_validity: bool = True
    ) -> None:
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "modulus", tuple(modulus))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not is_probable_prime(self.p):
            raise ECFpkValueError(f"p is not prime: {int_repr(self.p)}")
        if len(self.modulus) < 2:
            err_msg = f"invalid reduction polynomial degree: {len(self.modulus) - 1}"
            raise ECFpkValueError(err_msg)
        if self.modulus[-1] != 1:
            err_msg = "reduction polynomial is not monic: "
            err_msg += f"leading coefficient {self.modulus[-1]}"
            raise ECFpkValueError(err_msg)
        for c in self.modulus:
            if not 0 <= c < self.p:
                err_msg = f"reduction polynomial coefficient not in 0..p-1: {c}"
                raise ECFpkValueError(err_msg)

    def __str__(self) -> str:
        return f"F_{self.p}^{self.k} = F_{self.p}[t] / ({str_from_coeffs(self.modulus)})"

    @property
    def k(self) -> int:
        "The extension degree."
        return len(self.modulus) - 1

    @property
    def order(self) -> int:
        "The number of field elements."
        return self.p ** self.k

    @cached_property
    def prime_field(self) -> PrimeField:
        return PrimeField(self.p, check_validity=False)

    # element construction

    def _new(self, coeffs: Sequence[int]) -> "FieldElement":
        # coefficients are assumed to be already reduced
        return FieldElement(tuple(coeffs), self, check_validity=False)

    def element(self, value: FieldElementLike) -> "FieldElement":
        """Return a field element from many possible representations.

        Allowed representations are:

        * a FieldElement of this field
        * an int in [0, p), i.e. an element of the prime field
        * the sequence of the k coefficients, lowest degree first
        """

        if isinstance(value, FieldElement):
            self.require_same_field(value)
            return value
        if isinstance(value, int):
            if not 0 <= value < self.p:
                err_msg = f"coefficient not in 0..p-1: {int_repr(value)}"
                raise MalformedElementError(err_msg)
            return self.constant(value)
        return FieldElement(value, self)

    def constant(self, n: int) -> "FieldElement":
        "Return the embedding of the integer n (reduced mod p)."
        return self._new((n % self.p,) + (0,) * (self.k - 1))

    def zero(self) -> "FieldElement":
        return self._new((0,) * self.k)

    def one(self) -> "FieldElement":
        return self.constant(1)

    def from_index(self, i: int) -> "FieldElement":
        """Return the i-th element in the enumeration order.

        The coefficients are the base-p digits of i,
        the least significant digit being the constant coefficient.
        """

        if not 0 <= i < self.order:
            err_msg = f"index not in 0..p^k-1: {int_repr(i)}"
            raise ECFpkValueError(err_msg)
        coeffs = []
        for _ in range(self.k):
            i, c = divmod(i, self.p)
            coeffs.append(c)
        return self._new(coeffs)

    def enumerate_all(self) -> Iterator["FieldElement"]:
        """Return an iterator over all the p^k field elements.

        The most significant coefficient varies slowest,
        i.e. elements are in from_index order: 0, 1, ..., p-1, t, 1 + t, ...
        Each call returns a new iterator.
        """

        for digits in product(range(self.p), repeat=self.k):
            yield self._new(digits[::-1])

    # arithmetic

    def require_same_field(self, x: "FieldElement") -> None:
        if not isinstance(x, FieldElement):
            raise ECFpkTypeError(f"not a field element: {x!r}")
        if x.field is not self and x.field != self:
            err_msg = f"field mismatch: {x.field} instead of {self}"
            raise FieldMismatchError(err_msg)

    def add(self, x: "FieldElement", y: "FieldElement") -> "FieldElement":
        self.require_same_field(x)
        self.require_same_field(y)
        p = self.p
        return self._new([(xi + yi) % p for xi, yi in zip(x.coeffs, y.coeffs)])

    def sub(self, x: "FieldElement", y: "FieldElement") -> "FieldElement":
        self.require_same_field(x)
        self.require_same_field(y)
        p = self.p
        return self._new([(xi - yi) % p for xi, yi in zip(x.coeffs, y.coeffs)])

    def neg(self, x: "FieldElement") -> "FieldElement":
        self.require_same_field(x)
        return self._new([-xi % self.p for xi in x.coeffs])

    def _reduce(self, c: Sequence[int]) -> Tuple[int, ...]:
        """Fold a polynomial down to k coefficients.

        The highest-degree term c_i t^i (i >= k) is replaced by
        c_i t^(i-k) (t^k - modulus), as t^k = t^k - modulus,
        from the top degree down.
        """

        p, k, m = self.p, self.k, self.modulus
        c = list(c) + [0] * (k - len(c))
        for i in range(len(c) - 1, k - 1, -1):
            top = c[i] % p
            if top:
                for j in range(k):
                    c[i - k + j] -= top * m[j]
        return tuple(ci % p for ci in c[:k])

    def mul(self, x: "FieldElement", y: "FieldElement") -> "FieldElement":
        self.require_same_field(x)
        self.require_same_field(y)
        return self._new(self._reduce(poly_mul(x.coeffs, y.coeffs, self.p)))

    def square(self, x: "FieldElement") -> "FieldElement":
        return self.mul(x, x)

    def inv(self, x: "FieldElement") -> "FieldElement":
        """Return the multiplicative inverse of x.

        For k=2 the closed form norm/conjugate formula is used,
        otherwise the Extended Euclidean Algorithm over F_p[t].
        """

        self.require_same_field(x)
        if x.is_zero():
            raise NotInvertibleError(f"No inverse for zero in {self}")
        if self.k == 2:
            return self._inv_norm(x)
        return self.inv_xgcd(x)

    def _reducible_modulus_error(self, x: "FieldElement") -> NotInvertibleError:
        err_msg = f"No inverse for {x}: "
        err_msg += f"reducible reduction polynomial {str_from_coeffs(self.modulus)}"
        return NotInvertibleError(err_msg)

    def _inv_norm(self, x: "FieldElement") -> "FieldElement":
        # with modulus t^2 + m1 t + m0, the conjugate of t is -m1 - t
        # x = a + bt, conjugate(x) = (a - b m1) - bt
        # N(x) = x conjugate(x) = a (a - b m1) + m0 b^2 is in F_p
        p = self.p
        m0, m1 = self.modulus[0], self.modulus[1]
        a, b = x.coeffs
        conj_a = (a - b * m1) % p
        conj_b = -b % p
        norm = (a * conj_a + m0 * b * b) % p
        if norm == 0:
            raise self._reducible_modulus_error(x)
        n_inv = self.prime_field.inv(norm)
        return self._new((conj_a * n_inv % p, conj_b * n_inv % p))

    def inv_xgcd(self, x: "FieldElement") -> "FieldElement":
        """Return the inverse of x using the Extended Euclidean Algorithm.

        From x*u + modulus*v = g, with g a nonzero constant,
        the inverse is u/g.
        """

        self.require_same_field(x)
        if x.is_zero():
            raise NotInvertibleError(f"No inverse for zero in {self}")
        g, u, _ = poly_xgcd(x.coeffs, self.modulus, self.p)
        if len(g) != 1:
            raise self._reducible_modulus_error(x)
        g_inv = self.prime_field.inv(g[0])
        return self._new(self._reduce(poly_scale(u, g_inv, self.p)))

    def div(self, x: "FieldElement", y: "FieldElement") -> "FieldElement":
        return self.mul(x, self.inv(y))

    def pow(self, x: "FieldElement", e: int) -> "FieldElement":
        "Return x^e using square & multiply; negative e requires x invertible."

        self.require_same_field(x)
        if e < 0:
            x, e = self.inv(x), -e
        result = self.one()
        while e > 0:
            if e & 1:
                result = self.mul(result, x)
            x = self.mul(x, x)
            e >>= 1
        return result

    # square roots

    def is_square(self, x: "FieldElement") -> bool:
        """Return True if x has a square root in the field.

        Euler criterion: x^((q-1)/2) = 1, with q = p^k odd.
        In characteristic 2 every element is a square.
        """

        self.require_same_field(x)
        if x.is_zero() or self.p == 2:
            return True
        return self.pow(x, (self.order - 1) // 2) == self.one()

    @cached_property
    def _non_residue(self) -> "FieldElement":
        # the smallest index non-square element
        for z in self.enumerate_all():
            if not self.is_square(z):
                return z
        raise ECFpkRuntimeError(f"no quadratic non-residue in {self}")

    def sqrt(self, x: "FieldElement") -> "FieldElement":
        """Return a square root of x; the other one is its opposite.

        The Tonelli-Shanks algorithm is used, with q = p^k odd;
        in characteristic 2 the root is x^(q/2).

        https://en.wikipedia.org/wiki/Tonelli%E2%80%93Shanks_algorithm
        """

        self.require_same_field(x)
        if x.is_zero():
            return x
        q = self.order
        if self.p == 2:
            return self.pow(x, q // 2)
        if not self.is_square(x):
            raise ECFpkValueError(f"no root for {x} in {self}")

        # Factor q-1 on the form s_odd * 2^s (with s_odd odd)
        s_odd, s = q - 1, 0
        while s_odd & 1 == 0:
            s += 1
            s_odd >>= 1

        one = self.one()
        c = self.pow(self._non_residue, s_odd)
        r = self.pow(x, (s_odd + 1) // 2)
        t = self.pow(x, s_odd)
        while t != one:
            # Find the lowest i such that t^(2^i) = 1
            i, t2i = 0, t
            while t2i != one:
                t2i = self.mul(t2i, t2i)
                i += 1
            # Update next value to iterate
            b = self.pow(c, 1 << (s - i - 1))
            r = self.mul(r, b)
            c = self.mul(b, b)
            t = self.mul(t, c)
            s = i
        return r


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    """Element of an extension field F_p^k.

    An immutable value: exactly k coefficients, lowest degree first,
    each in [0, p).
    """

    coeffs: Tuple[int, ...] = dataclass_field(
        metadata=config(encoder=list, decoder=tuple)
    )
    field: ExtensionField
    check_validity: InitVar[bool] = True

    def __init__(
        self,
        coeffs: Coefficients,
        field: ExtensionField,
        check_validity: bool = True,
    ) -> None:
        object.__setattr__(self, "coeffs", tuple(coeffs))
        object.__setattr__(self, "field", field)

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not isinstance(self.field, ExtensionField):
            raise ECFpkTypeError(f"not an extension field: {self.field!r}")
        if len(self.coeffs) != self.field.k:
            err_msg = f"invalid coefficient vector length: {len(self.coeffs)}"
            err_msg += f" instead of {self.field.k}"
            raise MalformedElementError(err_msg)
        for c in self.coeffs:
            if not isinstance(c, int):
                raise MalformedElementError(f"not an integer coefficient: {c!r}")
            if not 0 <= c < self.field.p:
                err_msg = f"coefficient not in 0..p-1: {int_repr(c)}"
                raise MalformedElementError(err_msg)

    def __str__(self) -> str:
        return str_from_coeffs(self.coeffs)

    def is_zero(self) -> bool:
        return not any(self.coeffs)

    def index(self) -> int:
        "Return the position of the element in the enumeration order."
        i = 0
        for c in reversed(self.coeffs):
            i = i * self.field.p + c
        return i

    def __add__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.field.add(self, other)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.field.sub(self, other)

    def __neg__(self) -> "FieldElement":
        return self.field.neg(self)

    def __mul__(self, other: Union["FieldElement", int]) -> "FieldElement":
        # bool is an int, but not a meaningful factor
        if isinstance(other, int) and not isinstance(other, bool):
            return self.field.mul(self, self.field.constant(other))
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.field.mul(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.field.div(self, other)

    def __pow__(self, e: int) -> "FieldElement":
        if not isinstance(e, int):
            return NotImplemented
        return self.field.pow(self, e)
