"""
calath.engines.factory
----------------------
Transforms pure data definitions into live, verified CalendarEngine objects.
"""

from __future__ import annotations

import logging

from ..core.types import CalendarDefinition
from .calendar import CalendarEngine
from .consistency import validate

log = logging.getLogger(__name__)


def make_engine(definition: CalendarDefinition) -> CalendarEngine:
    """The universal entry point. Refuses to build from a definition that fails validation."""
    if not isinstance(definition, CalendarDefinition):
        raise TypeError(f"Expected CalendarDefinition, got {type(definition).__name__}")
    validate(definition)
    engine = CalendarEngine(definition)
    log.debug("built calendar engine %r", definition.name)
    return engine
