from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from bass_studio.core.config import LOGGER_NAME, PARAMETER_FIELDS
from bass_studio.core.exceptions import UnknownParameter
from bass_studio.core.types import ParameterSet

logger = logging.getLogger(LOGGER_NAME)

Listener = Callable[[ParameterSet], None]


class ParameterStore:
    """Current model parameters plus a synchronous change notification.

    Values are stored as given; range limits belong to the input widgets.
    Listeners run synchronously in subscription order and must not raise:
    an exception propagates out of ``update`` after the value is stored and
    skips the remaining listeners.
    """

    def __init__(self, initial: ParameterSet | None = None):
        self._params = replace(initial) if initial is not None else ParameterSet()
        self._listeners: list[Listener] = []

    @property
    def current(self) -> ParameterSet:
        return replace(self._params)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, field: str, value: float | int) -> None:
        if field not in PARAMETER_FIELDS:
            raise UnknownParameter(field)
        setattr(self._params, field, value)
        logger.debug("Parameter %s set to %r", field, value)
        snapshot = self.current
        for listener in list(self._listeners):
            listener(snapshot)
