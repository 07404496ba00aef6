#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Polynomial arithmetic over the prime field F_p.

Polynomials are lists of integer coefficients,
lowest degree first: [2, 0, 1] is t^2 + 2.
All functions return trimmed polynomials
(no trailing zero coefficients) with coefficients in [0, p);
the zero polynomial is the empty list.

These are the building blocks of the extension field F_p^k,
i.e. F_p[t] modulo an irreducible polynomial of degree k.
"""

from typing import List, Tuple

from ecfpk.alias import Coefficients
from ecfpk.exceptions import ECFpkValueError
from ecfpk.number_theory import mod_inv

Poly = List[int]


def poly_trim(a: Coefficients) -> Poly:
    "Return the polynomial without trailing zero coefficients."
    end = len(a)
    while end > 0 and a[end - 1] == 0:
        end -= 1
    return list(a[:end])


def poly_degree(a: Coefficients) -> int:
    "Return the degree of the polynomial, -1 for the zero polynomial."
    return len(poly_trim(a)) - 1


def poly_add(a: Coefficients, b: Coefficients, p: int) -> Poly:
    if len(a) < len(b):
        a, b = b, a
    result = [c % p for c in a]
    for i, c in enumerate(b):
        result[i] = (result[i] + c) % p
    return poly_trim(result)


def poly_sub(a: Coefficients, b: Coefficients, p: int) -> Poly:
    result = [c % p for c in a]
    result.extend([0] * (len(b) - len(a)))
    for i, c in enumerate(b):
        result[i] = (result[i] - c) % p
    return poly_trim(result)


def poly_scale(a: Coefficients, c: int, p: int) -> Poly:
    return poly_trim([c * ai % p for ai in a])


def poly_mul(a: Coefficients, b: Coefficients, p: int) -> Poly:
    """Return the product of two polynomials.

    Schoolbook convolution: the product of two polynomials
    with m and n coefficients has m + n - 1 coefficients.
    """

    if not a or not b:
        return []
    result = [0] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        for j, bj in enumerate(b):
            result[i + j] = (result[i + j] + ai * bj) % p
    return poly_trim(result)


def poly_divmod(a: Coefficients, b: Coefficients, p: int) -> Tuple[Poly, Poly]:
    """Return (q, r) such that a = q*b + r, with deg(r) < deg(b).

    Polynomial long division: at each step
    the leading term of the remainder is cancelled.
    """

    b = poly_trim([c % p for c in b])
    if not b:
        raise ECFpkValueError("division by the zero polynomial")

    r = poly_trim([c % p for c in a])
    q = [0] * max(len(r) - len(b) + 1, 0)
    lead_inv = mod_inv(b[-1], p)
    while len(r) >= len(b):
        c = r[-1] * lead_inv % p
        shift = len(r) - len(b)
        q[shift] = c
        for i, bi in enumerate(b):
            r[shift + i] = (r[shift + i] - c * bi) % p
        # the leading coefficient is now zero
        r = poly_trim(r)
    return poly_trim(q), r


def poly_mod(a: Coefficients, m: Coefficients, p: int) -> Poly:
    return poly_divmod(a, m, p)[1]


def poly_pow_mod(a: Coefficients, e: int, m: Coefficients, p: int) -> Poly:
    "Return a^e (mod m), using square & multiply."

    if e < 0:
        raise ECFpkValueError(f"negative exponent: {e}")
    result: Poly = poly_mod([1], m, p)
    base = poly_mod(a, m, p)
    while e > 0:
        if e & 1:
            result = poly_mod(poly_mul(result, base, p), m, p)
        base = poly_mod(poly_mul(base, base, p), m, p)
        e >>= 1
    return result


def poly_xgcd(a: Coefficients, b: Coefficients, p: int) -> Tuple[Poly, Poly, Poly]:
    """Return (g, u, v) such that a*u + b*v = g = gcd(a, b).

    Extended Euclidean Algorithm over F_p[t].
    The gcd is not normalized to be monic:
    it is determined up to a nonzero constant factor.
    """

    r0, r1 = poly_trim([c % p for c in a]), poly_trim([c % p for c in b])
    u0, u1 = [1], []
    v0, v1 = [], [1]
    while r1:
        q, r = poly_divmod(r0, r1, p)
        r0, r1 = r1, r
        u0, u1 = u1, poly_sub(u0, poly_mul(q, u1, p), p)
        v0, v1 = v1, poly_sub(v0, poly_mul(q, v1, p), p)
    return r0, u0, v0


def _prime_divisors(n: int) -> List[int]:
    divisors = []
    d = 2
    while d * d <= n:
        if n % d == 0:
            divisors.append(d)
            while n % d == 0:
                n //= d
        d += 1
    if n > 1:
        divisors.append(n)
    return divisors


def is_irreducible(f: Coefficients, p: int) -> bool:
    """Return True if f is irreducible over F_p.

    Rabin's test: f of degree n is irreducible if and only if
    t^(p^n) = t (mod f) and gcd(t^(p^(n/q)) - t, f) = 1
    for each prime divisor q of n.

    https://en.wikipedia.org/wiki/Factorization_of_polynomials_over_finite_fields#Rabin's_test_of_irreducibility
    """

    f = poly_trim([c % p for c in f])
    n = len(f) - 1
    if n < 1:
        return False
    if n == 1:
        return True

    t = [0, 1]
    for q in _prime_divisors(n):
        h = poly_sub(poly_pow_mod(t, p ** (n // q), f, p), t, p)
        g = poly_xgcd(f, h, p)[0]
        if len(g) != 1:
            return False

    h = poly_sub(poly_pow_mod(t, p ** n, f, p), t, p)
    return not h
