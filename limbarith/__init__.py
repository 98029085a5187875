"""Unsigned big integers on 32-bit limbs with borrow-propagating subtraction, limb helpers and error types."""

__version__ = "0.4.6"
__all__ = ["biguint", "digits", "errors"]