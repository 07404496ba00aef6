#!/usr/bin/env python3

# Copyright (C) 2026 The ecfpk developers
#
# This file is part of ecfpk. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfpk including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecfpk package."

name = "ecfpk"
__version__ = "2026.10.19"
__author__ = "The ecfpk developers"
__author_email__ = "devs@ecfpk.org"
__copyright__ = "Copyright (C) 2026 The ecfpk developers"
__license__ = "MIT License"
