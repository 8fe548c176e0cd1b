"""BLAKE2s parameter handling and hashing primitives.

The central piece is :func:`~blake2kit.crypto.params.build_parameter_block`,
which turns a :class:`~blake2kit.config.HashConfig` into the eight words the
compression engine XORs into its initialization vector.
"""

from __future__ import annotations

from .errors import (
    ArgumentRangeError,
    ArgumentTypeError,
    Blake2sError,
    HasherStateError,
    KeyLengthError,
    KeyTooLongError,
    MissingArgumentError,
    OutputSizeError,
    ParameterRangeError,
    PersonalizationLengthError,
    SaltLengthError,
)
from .hashes import Blake2sHasher, compute_hash, create
from .params import (
    BLAKE2S_IV,
    ParameterBlock,
    ParameterHeader,
    build_parameter_block,
)
from .validation import (
    validate_key,
    validate_message,
    validate_output_size,
    validate_personalization,
    validate_salt,
)

__all__ = [
    "ArgumentRangeError",
    "ArgumentTypeError",
    "BLAKE2S_IV",
    "Blake2sError",
    "Blake2sHasher",
    "HasherStateError",
    "KeyLengthError",
    "KeyTooLongError",
    "MissingArgumentError",
    "OutputSizeError",
    "ParameterBlock",
    "ParameterHeader",
    "ParameterRangeError",
    "PersonalizationLengthError",
    "SaltLengthError",
    "build_parameter_block",
    "compute_hash",
    "create",
    "validate_key",
    "validate_message",
    "validate_output_size",
    "validate_personalization",
    "validate_salt",
]
