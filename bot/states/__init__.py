"""Bot states."""

from states.lookup import StatsStates, CompareStates

__all__ = ["StatsStates", "CompareStates"]
