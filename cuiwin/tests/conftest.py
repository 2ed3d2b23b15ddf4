# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from cuiwin.core import Core


@pytest.fixture(autouse=True)
def core():
    Core.reset_instance()
    yield Core()
    Core.reset_instance()
