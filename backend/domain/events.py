"""
Event notifications for collaborators (UI, audio).

The engine never talks to a menu or a sound device directly; it emits
named events and whoever cares subscribes.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventEmitter:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, event: str, listener: Listener):
        self._listeners[event].append(listener)

    def unsubscribe(self, event: str, listener: Listener):
        if listener in self._listeners.get(event, []):
            self._listeners[event].remove(listener)

    def emit(self, event: str, **payload):
        """Call every listener for `event` in subscription order."""
        listeners = list(self._listeners.get(event, []))
        logger.debug(f"Emitting {event} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(**payload)
