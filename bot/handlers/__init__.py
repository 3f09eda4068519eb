"""Bot handlers."""

from handlers import common, stats, compare

__all__ = ["common", "stats", "compare"]
