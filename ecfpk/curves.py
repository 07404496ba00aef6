#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named extension fields and elliptic curves.

The parameters are read from the json files in the data directory:

* fields.json maps a field name to [p, modulus],
  the modulus being the monic reduction polynomial,
  lowest degree first
* curves.json maps a curve name to [field name, a, b],
  a and b being coefficient lists of the curve equation
  y^2 = x^3 + a*x + b

The reduction polynomials are checked to be irreducible.
"""

import json
from os import path
from typing import Dict

from ecfpk.curve_group import CurveGroup
from ecfpk.exceptions import ECFpkValueError
from ecfpk.field import ExtensionField
from ecfpk.polynomial import is_irreducible

datadir = path.join(path.dirname(__file__), "data")

filename = path.join(datadir, "fields.json")
with open(filename, "r", encoding="ascii") as file_:
    fields_params = json.load(file_)
FIELDS: Dict[str, ExtensionField] = {}
for field_name, (p, modulus) in fields_params.items():
    if not is_irreducible(modulus, p):
        err_msg = f"reducible reduction polynomial for {field_name}: {modulus}"
        raise ECFpkValueError(err_msg)
    FIELDS[field_name] = ExtensionField(p, modulus)

filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    curves_params = json.load(file_)
CURVES: Dict[str, CurveGroup] = {}
for ec_name, (field_name, a, b) in curves_params.items():
    CURVES[ec_name] = CurveGroup(FIELDS[field_name], a, b)

# F_5^2 with t^2 = 3, and y^2 = x^3 + x + 1 over it
F5x2 = FIELDS["F5x2"]
ec5x2 = CURVES["ec5x2_1_1"]
