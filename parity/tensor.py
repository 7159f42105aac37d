"""Elementwise parity for fixed-width torch tensors.

Integer tensors (``int8`` to ``int64`` and ``uint8``) go through
:func:`is_even` / :func:`is_odd`, which use the least-significant-bit test.
Floating tensors (``float16``, ``bfloat16``, ``float32``, ``float64``) go
through :func:`float_is_even` / :func:`float_is_odd`, which follow the same
rule as :mod:`parity.floating`: NaN, infinities and values with a
fractional part are neither even nor odd.
"""

import torch


def is_even(values: torch.Tensor) -> torch.Tensor:
    """Elementwise evenness of an integer tensor.

    Args:
        values: Integer tensor of any shape

    Returns:
        ``torch.bool`` tensor with the same shape as ``values``
    """
    return (values & 1) == 0


def is_odd(values: torch.Tensor) -> torch.Tensor:
    """Elementwise oddness of an integer tensor."""
    return (values & 1) != 0


def _integral(values: torch.Tensor) -> torch.Tensor:
    return torch.isfinite(values) & (values == torch.trunc(values))


def float_is_even(values: torch.Tensor) -> torch.Tensor:
    """Elementwise evenness of a floating tensor.

    Args:
        values: Floating tensor of any shape

    Returns:
        ``torch.bool`` tensor with the same shape as ``values``
    """
    return _integral(values) & (torch.fmod(values, 2) == 0)


def float_is_odd(values: torch.Tensor) -> torch.Tensor:
    """Elementwise oddness of a floating tensor."""
    return _integral(values) & (torch.fmod(values, 2) != 0)
