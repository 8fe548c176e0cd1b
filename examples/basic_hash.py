#!/usr/bin/env python3
"""Basic blake2kit example.

This example demonstrates the facade entry points, the streaming hasher and
inspection of the parameter block that seeds the compression engine.
"""

import logging
import sys
from pathlib import Path

# Add the parent directory to the path so we can import blake2kit
sys.path.insert(0, str(Path(__file__).parent.parent))

from blake2kit import HashConfig, create, hash, hash_salt_personal
from blake2kit.crypto import Blake2sError, build_parameter_block


def basic_example() -> None:
    """Run a basic example of blake2kit usage."""
    print("blake2kit Basic Example")
    print("=" * 40)

    print("\n1. Unkeyed 32-byte digest...")
    print(f"   ✓ BLAKE2s-256('abc') = {hash('abc', None, 32).hex()}")

    print("\n2. Keyed 16-byte digest...")
    key = bytes(range(16))
    print(f"   ✓ {hash('abc', key, 16).hex()}")

    print("\n3. Salt and personalization...")
    digest = hash_salt_personal("abc", key, "0123456789abcdef", "my-app-v1-------", 32)
    print(f"   ✓ {digest.hex()}")

    print("\n4. Streaming...")
    hasher = create(HashConfig(output_size=32))
    for chunk in (b"a", b"b", b"c"):
        hasher.update(chunk)
    print(f"   ✓ {hasher.hexdigest()}")

    print("\n5. Parameter block...")
    block = build_parameter_block(HashConfig(output_size=32, key=key))
    print(f"   ✓ words = {[f'{w:08x}' for w in block.words]}")
    print(f"   ✓ initial state word 0 = {block.initial_state()[0]:08x}")

    print("\n6. Rejected configurations...")
    for label, args in (("15-byte key", (b"abc", bytes(15), 32)), ("64-byte digest", (b"abc", None, 64))):
        try:
            hash(*args)
        except Blake2sError as e:
            print(f"   ✓ {label}: {type(e).__name__}: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)
    basic_example()
