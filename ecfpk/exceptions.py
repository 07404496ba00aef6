#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecfpk from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecfpk versions are derived.
An ECFpkRuntimeError always signals a defect in ecfpk itself,
never bad input.
"""


class ECFpkValueError(ValueError):
    pass


class ECFpkTypeError(TypeError):
    pass


class ECFpkRuntimeError(RuntimeError):
    pass


class NotInvertibleError(ECFpkValueError):
    "Inversion of zero or of a zero divisor."


class MalformedElementError(ECFpkValueError):
    "Coefficient vector of the wrong length or not reduced."


class FieldMismatchError(ECFpkValueError):
    "Operands belonging to different field contexts."
