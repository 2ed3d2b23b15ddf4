# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Singleton(type):
    """
    Metaclass for classes with exactly one instance.

    The first call constructs the instance, every further call returns
    it. ``reset_instance`` drops it, so the next call constructs a fresh
    one.
    """
    def __init__(cls, name, bases, dct):
        super(Singleton, cls).__init__(name, bases, dct)
        cls.__instance__ = None

    def __call__(cls, *args, **kwargs):
        if cls.__instance__ is None:
            cls.__instance__ = super(Singleton, cls).__call__(*args, **kwargs)
        return cls.__instance__

    def reset_instance(cls):
        cls.__instance__ = None
