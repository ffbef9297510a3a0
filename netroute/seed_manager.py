"""Deterministic seed derivation for simulated policy attributes."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives independent, reproducible seeds from a single master seed.

    Components that need randomness (for example the BGP attribute generator
    of one query) ask for their own ``random.Random`` instead of touching the
    global ``random`` module, so results do not depend on call order.

    Usage:
        seeds = SeedManager(42)
        rng = seeds.create_random_state("bgp", "A", "E")
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """
        Args:
            master_seed: Master seed. ``None`` disables derivation and every
                random state created is unseeded.
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a 31-bit seed from the master seed and component identifiers.

        Args:
            *components: Identifiers naming the consumer, e.g.
                ``("bgp", source, destination)``.

        Returns:
            Positive integer seed, or ``None`` without a master seed.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        digest = hashlib.sha256(seed_input.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Return a new ``random.Random`` seeded for the given components."""
        rng = random.Random()
        derived = self.derive_seed(*components)
        if derived is not None:
            rng.seed(derived)
        return rng
