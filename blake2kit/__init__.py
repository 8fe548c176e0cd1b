"""blake2kit: BLAKE2s hashing with keys, salt and personalization."""

__version__ = "0.1.0"

from .blake2s import hash, hash_salt_personal
from .config import HashConfig
from .crypto import Blake2sHasher, compute_hash, create

__all__ = [
    "Blake2sHasher",
    "HashConfig",
    "compute_hash",
    "create",
    "hash",
    "hash_salt_personal",
]
