"""
Exception types raised by the algorithms toolkit.

Comparator and key-extractor failures are never wrapped; only problems the
toolkit itself detects in its inputs are reported with these classes.
"""


class AlgoToolkitError(Exception):
    """Base class for all toolkit errors."""


class ConfigurationError(AlgoToolkitError, ValueError):
    """Input shape or parameter is invalid (mismatched lengths, bad k, ragged vectors)."""


class NumericalError(AlgoToolkitError, ArithmeticError):
    """Computation is undefined for the given input (e.g. zero variance)."""
