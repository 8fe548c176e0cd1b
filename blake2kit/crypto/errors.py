"""Shared exceptions for :mod:`blake2kit.crypto`.

Every validation failure aborts the hash before any message bytes are
processed. Length errors also subclass :class:`ValueError` and a missing
argument or an argument of the wrong type subclasses :class:`TypeError`, so
generic handlers keep working. Arguments are never coerced.
"""

from __future__ import annotations


class Blake2sError(Exception):
    """Base error for BLAKE2s operations."""


class KeyLengthError(Blake2sError, ValueError):
    """Raised when a key is outside the accepted length range."""


class KeyTooLongError(KeyLengthError):
    """Raised when a key does not fit the parameter block's key length byte."""


class OutputSizeError(Blake2sError, ValueError):
    """Raised when the facade is asked for an unsupported digest size."""


class ParameterRangeError(Blake2sError, ValueError):
    """Raised when a digest length does not fit the parameter block."""


ArgumentRangeError = ParameterRangeError


class SaltLengthError(Blake2sError, ValueError):
    """Raised when a salt has the wrong length."""


class PersonalizationLengthError(Blake2sError, ValueError):
    """Raised when a personalization string has the wrong length."""


class MissingArgumentError(Blake2sError, TypeError):
    """Raised when a required argument is ``None``."""


class ArgumentTypeError(Blake2sError, TypeError):
    """Raised when an argument is not text or a bytes-like buffer."""


class HasherStateError(Blake2sError):
    """Raised when a finished hasher is fed more data."""
