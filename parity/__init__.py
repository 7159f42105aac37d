# parity package
from .integer import is_even, is_odd
from .floating import is_even as float_is_even, is_odd as float_is_odd

__all__ = ['is_even', 'is_odd', 'float_is_even', 'float_is_odd']
