"""Parity of floats.

A float only has a parity when it holds an integral value.  ``% 1`` of nan
or an infinity is nan, so those are neither even nor odd.  Plain ``int``
values are accepted too and never overflow.
"""


def is_even(value: float) -> bool:
    """Return True if ``value`` is an integral number divisible by two."""
    return value % 1 == 0 and value % 2 == 0


def is_odd(value: float) -> bool:
    """Return True if ``value`` is an integral number not divisible by two."""
    return value % 1 == 0 and value % 2 != 0
