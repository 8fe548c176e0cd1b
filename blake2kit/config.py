"""Configuration for blake2kit.

Bounds live here as named constants so the two validation layers (the public
facade's policy and the BLAKE2s parameter-block wire format) can be audited
against each other in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional


# Facade policy
BYTES_MIN: Final[int] = 1
BYTES_MAX: Final[int] = 64
KEY_BYTES_MIN: Final[int] = 16
KEY_BYTES_MAX: Final[int] = 64
OUT_BYTES: Final[int] = 64
SALT_BYTES: Final[int] = 16
PERSONAL_BYTES: Final[int] = 16

# Wire format
WIRE_OUT_BYTES_MIN: Final[int] = 1
WIRE_OUT_BYTES_MAX: Final[int] = 32
WIRE_KEY_BYTES_MAX: Final[int] = 32
WIRE_SALT_BYTES: Final[int] = 8
WIRE_PERSONAL_BYTES: Final[int] = 8

# Tree mode is always leaf-only
FAN_OUT: Final[int] = 1
MAX_DEPTH: Final[int] = 1
LEAF_LENGTH: Final[int] = 0
INNER_LENGTH: Final[int] = 0

DEFAULT_OUTPUT_SIZE: Final[int] = 32


@dataclass(frozen=True)
class HashConfig:
    """Per-invocation BLAKE2s configuration.

    Values are checked by :func:`blake2kit.crypto.params.build_parameter_block`
    against the wire-format bounds, not here.
    """

    output_size: int = DEFAULT_OUTPUT_SIZE
    key: Optional[bytes] = None
    salt: Optional[bytes] = None
    personalization: Optional[bytes] = None

    @property
    def key_length(self) -> int:
        return len(self.key) if self.key else 0
