"""Configuration defaults for NetRoute engines."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class RoutingConfig:
    """Tunable defaults for path enumeration and simulated policy attributes."""

    # Maximum hop depth when enumerating candidate paths for policy selection
    max_path_depth: int = 10

    # Inclusive range for simulated BGP local-preference values
    local_pref_range: Tuple[int, int] = (100, 199)

    # Inclusive range for simulated multi-exit-discriminator values
    med_range: Tuple[int, int] = (0, 49)

    def clamp_depth(self, depth: Optional[int] = None) -> int:
        """Return a usable enumeration depth.

        ``None`` selects ``max_path_depth``; anything below one hop is raised
        to one so that directly adjacent destinations are still found.
        """
        if depth is None:
            return self.max_path_depth
        return max(1, int(depth))


# Global configuration instance
ROUTING_CONFIG = RoutingConfig()
