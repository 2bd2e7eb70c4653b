from typing import Any


class Singleton:
    # Singleton pattern.
    # https://www.python.org/download/releases/2.2/descrintro/#__new__
    def __new__(cls, *args, **kwds):
        it = cls.__dict__.get("__it__")
        if it is not None:
            return it
        cls.__it__ = it = object.__new__(cls)
        it.init(*args, **kwds)
        return it

    def init(self, *args, **kwds):
        pass


class MissingType(Singleton):
    """Type for the :data:`flags.MISSING` singleton."""

    def __repr__(self) -> str:
        return "flags.MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = MissingType()
"""Sentinel for a default value that was not supplied. Flags declared without a
default fall back to the empty value of their kind, for example:

.. code-block:: python

    flags.define_integer("port")  # Default is 0.
    flags.define_string_list("hosts")  # Default is [].
"""
