"""FSM states for competitor lookups."""

from aiogram.fsm.state import State, StatesGroup


class StatsStates(StatesGroup):
    """States for /stats without an ID."""

    waiting_for_id = State()


class CompareStates(StatesGroup):
    """States for /compare; IDs are asked one by one."""

    waiting_for_first = State()
    waiting_for_second = State()  # first_id stored in FSM data
