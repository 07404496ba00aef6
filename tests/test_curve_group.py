#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfpk.curve_group` module."

import pickle
from typing import List

import pytest

from ecfpk.alias import INF, AffinePoint, Infinity
from ecfpk.curve_group import CurveGroup, mult_aff, str_from_point
from ecfpk.exceptions import (
    ECFpkRuntimeError,
    ECFpkTypeError,
    ECFpkValueError,
    FieldMismatchError,
)
from ecfpk.field import ExtensionField, FieldElement

# t^2 = 3 mod 5
F = ExtensionField(5, [2, 0, 1])
# y^2 = x^3 + x + 1
ec = CurveGroup(F, 1, 1)
# y^2 = x^3 + x, with points of order two
ec_2torsion = CurveGroup(F, 1, 0)


def e(*coeffs: int) -> FieldElement:
    return FieldElement(coeffs, F)


def all_points(curve: CurveGroup) -> List[AffinePoint]:
    return [
        (x, y)
        for x in curve.field.enumerate_all()
        for y in curve.field.enumerate_all()
        if curve.is_on_curve((x, y))
    ]


points = all_points(ec)


def test_infinity() -> None:
    assert INF == INF
    assert INF == Infinity()
    assert INF != (e(0, 0), e(0, 0))
    assert (e(0, 0), e(0, 0)) != INF
    assert hash(INF) == hash(Infinity())
    assert repr(INF) == "INF"
    assert pickle.loads(pickle.dumps(INF)) is INF


def test_curve_group() -> None:
    assert ec.field == F
    assert ec.a == e(1, 0)
    assert ec.b == e(1, 0)
    assert str(ec) == "Curve\n field = F_5^2 = F_5[t] / (2 + 1t^2)\n a     = 1\n b     = 1"
    assert repr(ec) == "CurveGroup(ExtensionField(p=5, modulus=(2, 0, 1)), (1, 0), (1, 0))"

    # a and b can be provided in many representations
    assert CurveGroup(F, e(1, 0), (1, 0)).b == ec.b
    CurveGroup(F, (0, 1), 3)


def test_exceptions() -> None:
    with pytest.raises(ECFpkTypeError, match="not an extension field: "):
        CurveGroup("F", 1, 1)  # type: ignore

    F2x4 = ExtensionField(2, [1, 1, 0, 0, 1])
    with pytest.raises(ECFpkValueError, match="characteristic 2 is not supported: "):
        CurveGroup(F2x4, 1, 1)

    with pytest.raises(ECFpkValueError, match="zero discriminant"):
        CurveGroup(F, 0, 0)
    # 4 * 2^3 + 27 * 2^2 = 140 = 0 mod 5
    with pytest.raises(ECFpkValueError, match="zero discriminant"):
        CurveGroup(F, 2, 2)

    with pytest.raises(FieldMismatchError, match="field mismatch: "):
        CurveGroup(F, FieldElement((1, 0), ExtensionField(7, [4, 0, 1])), 1)


def test_is_on_curve() -> None:
    assert ec.is_on_curve(INF)
    assert ec.is_on_curve((e(2, 0), e(4, 0)))
    assert ec.is_on_curve((e(1, 0), e(0, 4)))
    assert not ec.is_on_curve((e(1, 0), e(1, 0)))
    ec.require_on_curve((e(0, 0), e(1, 0)))
    with pytest.raises(ECFpkValueError, match="point not on curve"):
        ec.require_on_curve((e(1, 0), e(1, 0)))

    with pytest.raises(ECFpkTypeError, match="not a point: "):
        ec.is_on_curve((e(1, 0), e(1, 0), e(1, 0)))  # type: ignore
    with pytest.raises(ECFpkTypeError, match="not a point: "):
        ec.is_on_curve([e(1, 0), e(1, 0)])  # type: ignore
    with pytest.raises(ECFpkTypeError, match="not a field element: "):
        ec.is_on_curve((1, 1))  # type: ignore

    G = ExtensionField(7, [4, 0, 1])
    Q = FieldElement((1, 0), G), FieldElement((1, 0), G)
    with pytest.raises(FieldMismatchError, match="field mismatch: "):
        ec.is_on_curve(Q)
    with pytest.raises(FieldMismatchError, match="field mismatch: "):
        ec.add(Q, INF)


def test_y() -> None:
    assert ec.y2(e(1, 0)) == e(3, 0)
    assert ec.y2(1) == e(3, 0)
    assert ec.y(e(1, 0)) in (e(0, 1), e(0, 4))
    assert ec.y(0) in (e(1, 0), e(4, 0))

    for x in F.enumerate_all():
        if F.is_square(ec.y2(x)):
            y = ec.y(x)
            assert ec.is_on_curve((x, y))
            assert ec.is_on_curve((x, -y))
        else:
            with pytest.raises(ECFpkValueError, match="invalid x-coordinate: "):
                ec.y(x)


def test_negate() -> None:
    assert ec.negate(INF) == INF
    assert ec.negate((e(0, 0), e(1, 0))) == (e(0, 0), e(4, 0))
    assert ec.negate((e(1, 0), e(0, 4))) == (e(1, 0), e(0, 1))
    for P in points:
        assert ec.negate(ec.negate(P)) == P
        assert ec.is_on_curve(ec.negate(P))


def test_add() -> None:
    P1 = (e(2, 0), e(4, 0))
    P2 = (e(3, 0), e(4, 0))
    assert ec.add(P1, P2) == (e(0, 0), e(1, 0))
    assert ec.add(P2, P1) == (e(0, 0), e(1, 0))

    # doubling: lambda = (3 * 0 + 1) / 2 = 3
    P = (e(0, 0), e(1, 0))
    assert ec.add(P, P) == (e(4, 0), e(2, 0))
    assert ec.double_aff(P) == (e(4, 0), e(2, 0))

    assert ec.add(INF, INF) == INF
    assert ec.add_aff(INF, INF) == INF
    assert ec.double_aff(INF) == INF

    for P in points:
        assert ec.add(P, INF) == P
        assert ec.add(INF, P) == P
        assert ec.add(P, ec.negate(P)) == INF
        assert ec.add(ec.negate(P), P) == INF

    with pytest.raises(ECFpkValueError, match="point not on curve"):
        ec.add((e(1, 0), e(1, 0)), P)
    with pytest.raises(ECFpkValueError, match="point not on curve"):
        ec.add(P, (e(1, 0), e(1, 0)))


def test_group_law() -> None:
    for P in points:
        for Q in points:
            R = ec.add(P, Q)
            assert ec.is_on_curve(R)
            assert R == ec.add(Q, P)

    sample = points[::4]
    for P in sample:
        for Q in sample:
            PQ = ec.add(P, Q)
            for R in sample:
                assert ec.add(PQ, R) == ec.add(P, ec.add(Q, R))


def test_doubling() -> None:
    for P in points:
        x, y = P
        assert not y.is_zero()
        lam = (3 * x * x + ec.a) / (2 * y)
        x3 = lam * lam - 2 * x
        y3 = lam * (x - x3) - y
        assert ec.add(P, P) == (x3, y3)
        assert ec.double_aff(P) == (x3, y3)


def test_two_torsion() -> None:
    T = (e(0, 0), e(0, 0))
    assert ec_2torsion.is_on_curve(T)
    assert ec_2torsion.negate(T) == T
    assert ec_2torsion.add(T, T) == INF
    assert ec_2torsion.double_aff(T) == INF
    assert mult_aff(2, T, ec_2torsion) == INF

    two_torsion = [Q for Q in all_points(ec_2torsion) if Q[1].is_zero()]
    assert len(two_torsion) == 3
    for Q in two_torsion:
        assert ec_2torsion.add(Q, Q) == INF


def test_group_law_invariant() -> None:
    # points not on curve, same x but y2 != y1 and y2 != -y1
    Q = (e(0, 0), e(1, 0))
    R = (e(0, 0), e(2, 0))
    with pytest.raises(ECFpkRuntimeError, match="zero slope denominator: "):
        ec.add_aff(Q, R)


def test_mult_aff() -> None:
    P = points[0]
    assert mult_aff(0, P, ec) == INF
    assert mult_aff(0, INF, ec) == INF
    assert mult_aff(1, P, ec) == P
    assert mult_aff(1, INF, ec) == INF
    assert mult_aff(2, P, ec) == ec.add(P, P)
    assert mult_aff(3, P, ec) == ec.add(ec.add(P, P), P)

    # the group has 27 points
    for P in points:
        assert mult_aff(27, P, ec) == INF
        assert mult_aff(26, P, ec) == ec.negate(P)
        assert mult_aff(28, P, ec) == P

    with pytest.raises(ECFpkValueError, match="negative m: "):
        mult_aff(-1, P, ec)


def test_prime_field_curve() -> None:
    "y^2 = x^3 + 7x + 6 over F_13 has 11 points."

    F13 = ExtensionField(13, [0, 1])
    ec13 = CurveGroup(F13, 7, 6)
    G = (F13.element(1), F13.element(1))
    assert ec13.is_on_curve(G)
    assert mult_aff(11, G, ec13) == INF
    Q = G
    for _ in range(9):
        Q = ec13.add(Q, G)
        assert Q != INF
    assert ec13.add(Q, G) == INF


def test_str_from_point() -> None:
    assert str_from_point(INF) == "Point at Infinity"
    assert str_from_point((e(1, 0), e(0, 4))) == "Point (1, 4t)"
    assert str_from_point((e(3, 2), e(0, 0))) == "Point (3 + 2t, 0)"
