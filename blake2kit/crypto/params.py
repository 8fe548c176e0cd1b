"""BLAKE2s parameter block.

The parameter block is eight 32-bit words XORed into the initialization vector
before the first compression. Layout (word: field):

- 0: digest length (byte 0), key length (byte 1), fan-out (byte 2), depth (byte 3)
- 1: leaf length
- 2-3: node offset, node depth, inner length
- 4-5: salt (8 bytes, little-endian words)
- 6-7: personalization (8 bytes, little-endian words)
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Final, Optional

from blake2kit.config import (
    FAN_OUT,
    INNER_LENGTH,
    LEAF_LENGTH,
    MAX_DEPTH,
    WIRE_KEY_BYTES_MAX,
    WIRE_OUT_BYTES_MAX,
    WIRE_OUT_BYTES_MIN,
    WIRE_PERSONAL_BYTES,
    WIRE_SALT_BYTES,
    HashConfig,
)

from .errors import (
    KeyTooLongError,
    ParameterRangeError,
    PersonalizationLengthError,
    SaltLengthError,
)

logger = logging.getLogger(__name__)

BLAKE2S_IV: Final[tuple[int, ...]] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

WORD_COUNT: Final[int] = 8
BLOCK_BYTES: Final[int] = WORD_COUNT * 4
_MASK32: Final[int] = 0xFFFFFFFF
_PAIR_FMT: Final[str] = "<2I"


@dataclass(frozen=True, slots=True)
class ParameterHeader:
    """The four single-byte fields packed into word 0."""

    digest_length: int
    key_length: int
    fan_out: int = FAN_OUT
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        for name in ("digest_length", "key_length", "fan_out", "max_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= 0xFF):
                raise ValueError(f"{name} must be an int that fits in one byte")

    def pack(self) -> int:
        """Return the header as a 32-bit word, digest length in the low byte."""

        return (
            self.digest_length
            | (self.key_length << 8)
            | (self.fan_out << 16)
            | (self.max_depth << 24)
        )

    @classmethod
    def unpack(cls, word: int) -> "ParameterHeader":
        """Inverse of :meth:`pack`."""

        return cls(
            digest_length=word & 0xFF,
            key_length=(word >> 8) & 0xFF,
            fan_out=(word >> 16) & 0xFF,
            max_depth=(word >> 24) & 0xFF,
        )


@dataclass(frozen=True, slots=True)
class ParameterBlock:
    """An immutable, fully built BLAKE2s parameter block."""

    words: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.words) != WORD_COUNT:
            raise ValueError(f"parameter block must have {WORD_COUNT} words")
        if any(not (0 <= w <= _MASK32) for w in self.words):
            raise ValueError("parameter block words must be unsigned 32-bit")

    @property
    def header(self) -> ParameterHeader:
        return ParameterHeader.unpack(self.words[0])

    @property
    def leaf_length(self) -> int:
        return self.words[1]

    @property
    def node_offset(self) -> int:
        # 48-bit field spanning word 2 and the low half of word 3
        return self.words[2] | ((self.words[3] & 0xFFFF) << 32)

    @property
    def node_depth(self) -> int:
        return (self.words[3] >> 16) & 0xFF

    @property
    def inner_length(self) -> int:
        return (self.words[3] >> 24) & 0xFF

    @property
    def salt(self) -> bytes:
        return struct.pack(_PAIR_FMT, self.words[4], self.words[5])

    @property
    def personalization(self) -> bytes:
        return struct.pack(_PAIR_FMT, self.words[6], self.words[7])

    def to_bytes(self) -> bytes:
        """Serialize as 32 little-endian bytes."""

        return struct.pack("<8I", *self.words)

    def initial_state(self, iv: tuple[int, ...] = BLAKE2S_IV) -> tuple[int, ...]:
        """Return the chaining state the compression engine starts from."""

        if len(iv) != WORD_COUNT:
            raise ValueError(f"iv must have {WORD_COUNT} words")
        return tuple((v ^ p) & _MASK32 for v, p in zip(iv, self.words))


def _pack_pair(data: Optional[bytes], *, expected: int, error: type[Exception], name: str) -> tuple[int, int]:
    if not data:
        return 0, 0
    if len(data) != expected:
        raise error(f"config.{name} has invalid length")
    return struct.unpack(_PAIR_FMT, data)


def build_parameter_block(config: HashConfig) -> ParameterBlock:
    """Build the parameter block for ``config``.

    Args:
        config: A hash configuration. The salt and personalization, when
            present, must already be the 8-byte wire window.

    Returns:
        :class:`ParameterBlock`.

    Raises:
        ParameterRangeError: If the output size is outside 1..32.
        KeyTooLongError: If the key is longer than 32 bytes.
        SaltLengthError: If a salt is present but not 8 bytes.
        PersonalizationLengthError: If a personalization is present but not 8 bytes.
    """

    size = config.output_size
    if (
        isinstance(size, bool)
        or not isinstance(size, int)
        or not (WIRE_OUT_BYTES_MIN <= size <= WIRE_OUT_BYTES_MAX)
    ):
        logger.debug(
            "Output size %r does not fit the parameter block",
            size,
            extra={"output_size": size},
        )
        raise ParameterRangeError("config.output_size out of range")

    key_length = config.key_length
    if key_length > WIRE_KEY_BYTES_MAX:
        logger.debug(
            "Key of %d bytes does not fit the parameter block",
            key_length,
            extra={"key_length": key_length},
        )
        raise KeyTooLongError("key too long")

    salt = _pack_pair(config.salt, expected=WIRE_SALT_BYTES, error=SaltLengthError, name="salt")
    personal = _pack_pair(
        config.personalization,
        expected=WIRE_PERSONAL_BYTES,
        error=PersonalizationLengthError,
        name="personalization",
    )

    header = ParameterHeader(digest_length=config.output_size, key_length=key_length)
    block = ParameterBlock(
        words=(
            header.pack(),
            LEAF_LENGTH,
            0,
            INNER_LENGTH << 24,
            *salt,
            *personal,
        )
    )
    logger.debug(
        "Built parameter block (digest_length=%d, key_length=%d)",
        config.output_size,
        key_length,
        extra={"output_size": config.output_size, "key_length": key_length},
    )
    return block
