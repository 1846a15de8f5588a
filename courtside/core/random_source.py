"""
Injected random sources.

Everything in the core that rolls dice takes an optional ``rng`` argument
(a ``random.Random``). Passing a seeded instance makes preseason pairings,
free agent preferences and CPU offers reproducible, which is what tests and
AI debugging sessions rely on. Nothing here touches the module-level
``random`` generator.
"""

import hashlib
import random
from typing import Optional, Union
from uuid import UUID


def derive_seed(*parts: object) -> int:
    """
    Derive a stable 64-bit seed from arbitrary parts.

    Uses sha256 rather than hash() so the value survives interpreter restarts
    (hash randomization would otherwise change it every run).
    """
    raw = "|".join(str(p) for p in parts)
    digest = hashlib.sha256(raw.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def make_rng(seed: Optional[Union[int, str]] = None) -> random.Random:
    """Create a generator, seeded from an int or any string key."""
    if seed is None:
        return random.Random()
    if isinstance(seed, int):
        return random.Random(seed)
    return random.Random(derive_seed(seed))


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    """Return the caller's generator, or a fresh unseeded one."""
    return rng if rng is not None else random.Random()


def random_uuid(rng: random.Random) -> str:
    """A version-4 UUID string drawn from ``rng`` (deterministic when seeded)."""
    return str(UUID(int=rng.getrandbits(128), version=4))
