"""Incremental BLAKE2s hashing.

The compression rounds are delegated to :func:`hashlib.blake2s`. The engine is
configured only from a built :class:`~blake2kit.crypto.params.ParameterBlock`
(plus the key bytes, which the block does not carry), so the block decides
what state the engine starts from.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Optional

from cryptography.hazmat.primitives import constant_time

from blake2kit.config import HashConfig

from .errors import HasherStateError, KeyLengthError
from .params import ParameterBlock, build_parameter_block

logger = logging.getLogger(__name__)


def _engine_for(block: ParameterBlock, key: bytes):
    header = block.header
    if header.key_length != len(key):
        raise KeyLengthError("key length does not match the parameter block")
    return hashlib.blake2s(
        digest_size=header.digest_length,
        key=key,
        salt=block.salt,
        person=block.personalization,
        fanout=header.fan_out,
        depth=header.max_depth,
        leaf_size=block.leaf_length,
        node_offset=block.node_offset,
        node_depth=block.node_depth,
        inner_size=block.inner_length,
    )


def _slice(data: bytes, start: int, count: Optional[int]) -> memoryview:
    view = memoryview(data)
    if count is None:
        count = len(view) - start
    if start < 0 or count < 0 or start + count > len(view):
        raise ValueError("start and count must describe a range inside data")
    return view[start:start + count]


class Blake2sHasher:
    """Streaming BLAKE2s hasher.

    Example:
        >>> h = Blake2sHasher()
        >>> h.update(b"a")
        >>> h.update(b"bc")
        >>> h.finish().hex()[:16]
        '508c5e8c327c14e2'
    """

    def __init__(self, config: Optional[HashConfig] = None) -> None:
        self.config = config or HashConfig()
        self.parameter_block = build_parameter_block(self.config)
        self._key = self.config.key or b""
        self.init()

    @property
    def digest_size(self) -> int:
        return self.parameter_block.header.digest_length

    def init(self) -> None:
        """Reset to the freshly seeded state."""

        self._engine = _engine_for(self.parameter_block, self._key)
        self._finished = False

    def update(self, data: bytes, start: int = 0, count: Optional[int] = None) -> None:
        """Absorb ``data[start:start + count]`` (the rest of ``data`` if ``count`` is omitted)."""

        if self._finished:
            raise HasherStateError("hasher already finished; call init() to reuse it")
        self._engine.update(_slice(data, start, count))

    def finish(self) -> bytes:
        """Return the digest. Further updates require :meth:`init`."""

        self._finished = True
        return self._engine.digest()

    def hexdigest(self) -> str:
        return self.finish().hex()

    def copy(self) -> "Blake2sHasher":
        clone = object.__new__(Blake2sHasher)
        clone.config = self.config
        clone.parameter_block = self.parameter_block
        clone._key = self._key
        clone._engine = self._engine.copy()
        clone._finished = self._finished
        return clone

    def verify(self, expected: bytes) -> bool:
        """Finish and compare against ``expected`` in constant time."""

        return constant_time.bytes_eq(self.finish(), bytes(expected))


def create(config: Optional[HashConfig] = None) -> Blake2sHasher:
    return Blake2sHasher(config)


def compute_hash(
    data: bytes,
    start: int = 0,
    count: Optional[int] = None,
    config: Optional[HashConfig] = None,
) -> bytes:
    """One-shot BLAKE2s over ``data[start:start + count]``."""

    hasher = create(config)
    hasher.update(data, start, count)
    digest = hasher.finish()
    logger.debug("Computed %d-byte digest", len(digest), extra={"digest_size": len(digest)})
    return digest
