"""Bot utilities."""
from .formatters import format_profile, format_comparison
from .callbacks import CallbackPrefix

__all__ = [
    "format_profile",
    "format_comparison",
    "CallbackPrefix",
]
