"""
Callback data prefixes for inline keyboards.

Format: {prefix}:{action}:{param}
Example: cmp:with:2012PARK03
"""


class CallbackPrefix:
    """Prefixes for callback data."""

    STATS = "st"      # Competitor stats
    COMPARE = "cmp"   # Head-to-head comparison


# Usage examples:
# f"{CallbackPrefix.STATS}:show:2012PARK03"
# f"{CallbackPrefix.COMPARE}:with:2012PARK03"
