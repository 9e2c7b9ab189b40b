from __future__ import annotations
from calath.core.engine import CalendarRegistry
from calath.engines.specs import ALL_SPECS
from calath.engines.factory import make_engine

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, definition in ALL_SPECS.items():
        calendars[name] = make_engine(definition)
    return CalendarRegistry(calendars)
