"""Gestor de historial lineal y acotado.

Mantiene una tupla de snapshots (del más antiguo al más reciente) y un índice
que apunta al snapshot actual. Cada operación devuelve un HistoryState nuevo;
si no hay cambios se devuelve el mismo objeto.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Generic, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_HISTORY = 50


class HistoryOptions(BaseModel):
    """Opciones fijas del gestor (se validan al construirlas)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_history: int = Field(default=DEFAULT_MAX_HISTORY, ge=1)
    enable_redo: bool = True


@dataclass(frozen=True)
class HistoryState(Generic[T]):
    history: Tuple[T, ...]
    current_index: int
    initial_state: T

    @property
    def current(self) -> T:
        return self.history[self.current_index]


# Intenciones
@dataclass(frozen=True)
class SetState(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class GoToIndex:
    index: int


HistoryAction = Union[SetState, Undo, Redo, Reset, Clear, GoToIndex]


def initial_history_state(initial_state: T) -> HistoryState[T]:
    return HistoryState(history=(initial_state,), current_index=0, initial_state=initial_state)


def reduce_history(state: HistoryState[T], action: HistoryAction,
                   options: HistoryOptions) -> HistoryState[T]:
    """
    Aplica una intención al estado y devuelve el siguiente estado.
    Nunca lanza: los índices se recortan y los no-ops devuelven `state`.
    """
    if isinstance(action, SetState):
        # Truncar redo
        new_history = state.history[:state.current_index + 1] + (action.payload,)
        # Limitar
        if len(new_history) > options.max_history:
            new_history = new_history[-options.max_history:]
        return replace(state, history=new_history, current_index=len(new_history) - 1)

    if isinstance(action, Undo):
        if state.current_index > 0:
            return replace(state, current_index=state.current_index - 1)
        return state

    if isinstance(action, Redo):
        if options.enable_redo and state.current_index < len(state.history) - 1:
            return replace(state, current_index=state.current_index + 1)
        return state

    if isinstance(action, Reset):
        return replace(state, history=(state.initial_state,), current_index=0)

    if isinstance(action, Clear):
        return replace(state, history=(state.current,), current_index=0)

    if isinstance(action, GoToIndex):
        # Recortar antes de int(): inf y nan no se pueden convertir
        target = int(max(0, min(action.index, len(state.history) - 1)))
        if target == state.current_index:
            return state
        return replace(state, current_index=target)

    return state


class HistoryManager(Generic[T]):
    """
    Guarda el último HistoryState y le aplica intenciones.
    No es thread-safe: se asume una sola llamada en curso por instancia.
    """
    def __init__(self, initial_state: T, options: Optional[HistoryOptions] = None):
        self.options = options if options is not None else HistoryOptions()
        self._state: HistoryState[T] = initial_history_state(initial_state)

    def _dispatch(self, action: HistoryAction) -> HistoryState[T]:
        self._state = reduce_history(self._state, action, self.options)
        logger.debug("%s -> index %d of %d", type(action).__name__,
                     self._state.current_index, len(self._state.history))
        return self._state

    def get_state(self) -> HistoryState[T]:
        return self._state

    def set_state(self, value: T) -> HistoryState[T]:
        return self._dispatch(SetState(value))

    def undo(self) -> HistoryState[T]:
        return self._dispatch(Undo())

    def redo(self) -> HistoryState[T]:
        return self._dispatch(Redo())

    def reset(self) -> HistoryState[T]:
        return self._dispatch(Reset())

    def clear(self) -> HistoryState[T]:
        return self._dispatch(Clear())

    def go_to_index(self, index: int) -> HistoryState[T]:
        return self._dispatch(GoToIndex(index))


def create_history_manager(initial_state: T,
                           options: Optional[HistoryOptions] = None) -> HistoryManager[T]:
    return HistoryManager(initial_state, options)
