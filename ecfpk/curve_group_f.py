#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveGroup explorer functions.

These functions are meant to explore low-cardinality CurveGroup,
for didactical (and fun) reason only:
they walk through all the field elements.
"""

import logging
from typing import List

from ecfpk.alias import INF, AffinePoint, Point
from ecfpk.curve_group import CurveGroup
from ecfpk.exceptions import ECFpkValueError

logger = logging.getLogger(__name__)

# the brute force search tests order^2 (x, y) pairs
MAX_BRUTE_FORCE_ORDER = 1000
MAX_ORDER = 10000


def find_all_points(ec: CurveGroup) -> List[AffinePoint]:
    """Return all the affine group points, if p^k is low.

    Very unsophisticated walk-through approach:
    every (x, y) pair is tested against the curve equation,
    x varying slowest, both in enumeration order.
    INF is not included.
    """

    field = ec.field
    if field.order > MAX_BRUTE_FORCE_ORDER:
        err_msg = f"p^k is too big to test all (x, y) pairs: {field.order}"
        raise ECFpkValueError(err_msg)

    points: List[AffinePoint] = []
    for x in field.enumerate_all():
        for y in field.enumerate_all():
            if ec.is_on_curve((x, y)):
                points.append((x, y))

    logger.debug("%d affine points found by brute force on %r", len(points), ec)
    return points


def find_all_points_by_sqrt(ec: CurveGroup) -> List[AffinePoint]:
    """Return all the affine group points, if p^k is low.

    For each x the square roots of x^3 + a*x + b are computed,
    instead of testing all the y values.
    The result is the same list returned by find_all_points.
    """

    field = ec.field
    if field.order > MAX_ORDER:
        err_msg = f"p^k is too big to count all group points: {field.order}"
        raise ECFpkValueError(err_msg)

    points: List[AffinePoint] = []
    for x in field.enumerate_all():
        try:
            y = ec.y(x)
        except ECFpkValueError:
            continue

        if y.is_zero():
            points.append((x, y))
            continue
        roots = sorted((y, -y), key=lambda root: root.index())
        points.extend((x, root) for root in roots)

    logger.debug("%d affine points found by square roots on %r", len(points), ec)
    return points


def find_subgroup_points(ec: CurveGroup, G: Point) -> List[Point]:
    """Return all G-generated subgroup points, if p^k is low.

    The list is G, 2G, 3G, ..., INF.
    Very unsophisticated walk-through approach.
    """

    if ec.field.order > MAX_ORDER:
        err_msg = f"p^k is too big to count all subgroup points: {ec.field.order}"
        raise ECFpkValueError(err_msg)

    points: List[Point] = [G]
    while points[-1] != INF:
        Q = ec.add(points[-1], G)
        points.append(Q)

    logger.debug("subgroup of order %d", len(points))
    return points
