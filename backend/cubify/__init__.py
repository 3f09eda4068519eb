"""Cubify Stats: WCA competitor rankings, percentiles and head-to-head comparisons."""

__version__ = "0.1.0"
