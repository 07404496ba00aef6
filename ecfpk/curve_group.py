#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and functions.

The curve group is defined over an extension field F_p^k,
the prime field F_p being the k=1 case.
Points are either the INF singleton or affine tuples (x, y)
of field elements.
"""

from ecfpk.alias import INF, AffinePoint, FieldElementLike, Infinity, Point
from ecfpk.exceptions import ECFpkRuntimeError, ECFpkTypeError, ECFpkValueError
from ecfpk.field import ExtensionField, FieldElement


class CurveGroup:
    """Finite group of the points of an elliptic curve over F_p^k.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in F_p^k,
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(
        self, field: ExtensionField, a: FieldElementLike, b: FieldElementLike
    ) -> None:

        if not isinstance(field, ExtensionField):
            raise ECFpkTypeError(f"not an extension field: {field!r}")
        # the tangent slope (3x^2 + a) / 2y is not defined
        if field.p == 2:
            raise ECFpkValueError(f"characteristic 2 is not supported: {field}")
        self.field = field

        a = field.element(a)
        b = field.element(b)

        # Check that 4*a^3 + 27*b^2 ≠ 0
        d = 4 * a * a * a + 27 * b * b
        if d.is_zero():
            raise ECFpkValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> FieldElement:
        return self._a

    @property
    def b(self) -> FieldElement:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n field = {self.field}"
        result += f"\n a     = {self._a}"
        result += f"\n b     = {self._b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.field!r}, {self._a.coeffs}, {self._b.coeffs})"

    def _affine(self, Q: Point) -> AffinePoint:
        "Return the checked affine coordinates of a non-INF point."
        if not isinstance(Q, tuple) or len(Q) != 2:
            raise ECFpkTypeError(f"not a point: {Q!r}")
        x, y = Q
        self.field.require_same_field(x)
        self.field.require_same_field(y)
        return x, y

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        x, y = self._affine(Q)
        return x, -y

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def _slope(self, num: FieldElement, den: FieldElement) -> FieldElement:
        # a zero denominator can only be reached if the case dispatch
        # of the group law is incomplete or the points are not on curve
        if den.is_zero():
            err_msg = "zero slope denominator: "
            err_msg += "vertical line not handled by the group law"
            raise ECFpkRuntimeError(err_msg)
        return num / den

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if isinstance(R, Infinity):
            return Q
        if isinstance(Q, Infinity):
            return R

        x1, y1 = self._affine(Q)
        x2, y2 = self._affine(R)
        if x1 == x2:
            # opposite points, including the doubling of a point with y=0
            if y2 == -y1:
                return INF
            if y2 == y1:
                return self.double_aff(R)

        lam = self._slope(y2 - y1, x2 - x1)
        x = lam * lam - x1 - x2
        y = lam * (x1 - x) - y1
        return x, y

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if isinstance(Q, Infinity):
            return INF
        x1, y1 = self._affine(Q)
        # points of order two
        if y1.is_zero():
            return INF

        lam = self._slope(3 * x1 * x1 + self._a, 2 * y1)
        x = lam * lam - x1 - x1
        y = lam * (x1 - x) - y1
        return x, y

    def y2(self, x: FieldElementLike) -> FieldElement:
        "Return the right-hand side x^3 + a*x + b of the curve equation."
        x = self.field.element(x)
        return (x * x + self._a) * x + self._b

    def y(self, x: FieldElementLike) -> FieldElement:
        """Return the y coordinate from x, as in (x, y).

        The other y coordinate is its opposite.
        """
        x = self.field.element(x)
        try:
            return self.field.sqrt(self.y2(x))
        except ECFpkValueError as e:
            raise ECFpkValueError(f"invalid x-coordinate: {x}") from e

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECFpkValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        Points with coordinates from another field
        raise FieldMismatchError.
        """
        if isinstance(Q, Infinity):
            return True
        x, y = self._affine(Q)
        return self.y2(x) == y * y


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    The input point is assumed to be on curve.
    """

    if m < 0:
        raise ECFpkValueError(f"negative m: {hex(m)}")

    # R is the running result
    R: Point = INF
    while m > 0:
        if m & 1:
            R = ec.add_aff(R, Q)
        # the doubling part of 'double & add'
        Q = ec.double_aff(Q)
        m >>= 1
    return R


def str_from_point(Q: Point) -> str:
    "Return the human readable rendering of a point, e.g. 'Point (1, 4t)'."
    if isinstance(Q, Infinity):
        return "Point at Infinity"
    x, y = Q
    return f"Point ({x}, {y})"
