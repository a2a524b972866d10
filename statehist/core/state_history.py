from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, TypeVar, Union

from .history import DEFAULT_MAX_HISTORY, HistoryManager, HistoryOptions, HistoryState

logger = logging.getLogger(__name__)

T = TypeVar("T")

Updater = Callable[[T], T]
Listener = Callable[[HistoryState[T]], None]


class StateHistory(Generic[T]):
    """
    Envoltorio del HistoryManager para quien consume el historial (p.ej. la UI).

    - Resuelve actualizaciones funcionales: `set_state(lambda prev: prev + 1)`.
    - Expone `state`, `can_undo`, `can_redo` y una copia de `history`.
    - Llama a `on_value_change` sólo tras `set_state`.
    - Notifica a los suscriptores cuando una operación produce un estado nuevo.

    Las opciones se validan aquí (pydantic.ValidationError si no son válidas).
    """
    def __init__(self, initial_state: T, max_history: int = DEFAULT_MAX_HISTORY,
                 enable_redo: bool = True,
                 on_value_change: Optional[Callable[[T], None]] = None):
        self.options = HistoryOptions(max_history=max_history, enable_redo=enable_redo)
        self._manager: HistoryManager[T] = HistoryManager(initial_state, self.options)
        self._on_value_change = on_value_change
        self._listeners: List[Listener] = []

    # ---------- Lectura ----------
    @property
    def snapshot(self) -> HistoryState[T]:
        return self._manager.get_state()

    @property
    def state(self) -> T:
        return self.snapshot.current

    @property
    def current_index(self) -> int:
        return self.snapshot.current_index

    @property
    def history(self) -> List[T]:
        return list(self.snapshot.history)

    @property
    def can_undo(self) -> bool:
        return self.snapshot.current_index > 0

    @property
    def can_redo(self) -> bool:
        snap = self.snapshot
        return self.options.enable_redo and snap.current_index < len(snap.history) - 1

    # ---------- Suscripciones ----------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _apply(self, operation: Callable[[], HistoryState[T]]) -> HistoryState[T]:
        before = self._manager.get_state()
        after = operation()
        if after is not before:
            logger.debug("notificando a %d suscriptores", len(self._listeners))
            for listener in list(self._listeners):
                listener(after)
        return after

    # ---------- Operaciones ----------
    def set_state(self, value: Union[T, Updater]) -> HistoryState[T]:
        # Un callable se interpreta como función prev -> nuevo valor
        new_value = value(self.state) if callable(value) else value
        result = self._apply(lambda: self._manager.set_state(new_value))
        if self._on_value_change is not None:
            self._on_value_change(new_value)
        return result

    def undo(self) -> HistoryState[T]:
        return self._apply(self._manager.undo)

    def redo(self) -> HistoryState[T]:
        return self._apply(self._manager.redo)

    def reset(self) -> HistoryState[T]:
        return self._apply(self._manager.reset)

    def clear(self) -> HistoryState[T]:
        return self._apply(self._manager.clear)

    def go_to_index(self, index: int) -> HistoryState[T]:
        return self._apply(lambda: self._manager.go_to_index(index))
