"""Parity of Python integers.

Both checks look at the least-significant bit only.  ``&`` on a Python
``int`` behaves as if the value were stored in two's complement, so
negative values (including the minimum of any fixed width) classify the
same way they would in a machine register.
"""


def is_even(value: int) -> bool:
    """Return ``True`` if ``value`` is divisible by two.

    ``is_even(4)`` and ``is_even(-2**63)`` are true, ``is_even(7)`` is not.
    """
    return value & 1 == 0


def is_odd(value: int) -> bool:
    """Return ``True`` if ``value`` is not divisible by two.

    Always the exact complement of :func:`is_even`.
    """
    return value & 1 != 0
