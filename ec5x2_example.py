#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from ecfpk.curve_group import str_from_point
from ecfpk.curve_group_f import find_all_points
from ecfpk.curves import F5x2 as F
from ecfpk.curves import ec5x2 as ec

print("\n*** Field:")
print(F)

print("\n1. Field elements")
print(", ".join(str(x) for x in F.enumerate_all()))

print("\n*** EC:")
print(ec)

print("\n2. Curve points")
points = find_all_points(ec)
for Q in points:
    print(str_from_point(Q))
print(f"{len(points)} affine points, plus the point at infinity")

print("\n3. Point addition")
P1 = F.element([2, 0]), F.element([4, 0])
P2 = F.element([3, 0]), F.element([4, 0])
print(f"P1: {str_from_point(P1)}")
print(f"P2: {str_from_point(P2)}")
print(f"P1 + P2: {str_from_point(ec.add(P1, P2))}")

print("\n4. Point doubling")
P = F.element([1, 0]), F.element([0, 4])
print(f"P: {str_from_point(P)}")
print(f"P + P: {str_from_point(ec.add(P, P))}")
print(f"P - P: {str_from_point(ec.add(P, ec.negate(P)))}")
