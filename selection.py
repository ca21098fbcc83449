"""
Selection state for the station bottom sheet.

One ``SelectionModel`` per browser session holds which station was tapped last
and how far the sheet is open. Views either poll ``current_state()`` on each
script run or ``subscribe()`` to be told about every change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from log_setup import get_logger

logger = get_logger(__name__)


class SheetState(Enum):
    HIDDEN = "hidden"
    COLLAPSED = "collapsed"  # never assigned by any operation
    EXPANDED = "expanded"


@dataclass(frozen=True)
class Selection:
    selected_station_name: str = ""
    sheet_state: SheetState = SheetState.HIDDEN


Listener = Callable[[Selection], None]


class SelectionModel:
    """Single source of truth for the open station and the sheet state."""

    def __init__(self, initial: Selection | None = None):
        self._state = initial or Selection()
        self._listeners: list[Listener] = []

    def current_state(self) -> Selection:
        return self._state

    def select_station(self, station) -> None:
        """Open the sheet on ``station`` (anything with a ``name``, or a bare name)."""
        name = station if isinstance(station, str) else station.name
        self._set(Selection(selected_station_name=name, sheet_state=SheetState.EXPANDED))

    def dismiss(self) -> None:
        """Hide the sheet; the last name is kept but not shown."""
        self._set(Selection(selected_station_name=self._state.selected_station_name, sheet_state=SheetState.HIDDEN))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for every state change; returns an unsubscribe callable."""
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, state: Selection) -> None:
        previous, self._state = self._state, state
        logger.debug("Selection %s -> %s", previous, state)
        # a failing listener must not hide the change from the others
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Selection listener %r failed on %s", listener, state)
