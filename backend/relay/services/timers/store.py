import threading
from typing import Callable, Dict, Iterable, List, Optional

from .effects import Effect
from .events import Event, Init
from .reducer import State, reduce


class Store:
    """Serialises events through ``reduce`` and hands effects to an executor.

    Only one event is reduced at a time. Effects run after the lock is
    released, in the order the transition returned them, so a ``Close``
    that triggers a disconnect handler can dispatch again safely.
    """

    def __init__(self, executor: Optional[Callable[[Iterable[Effect]], None]] = None):
        self._lock = threading.Lock()
        self._executor = executor
        self._sessions: Dict[str, str] = {}
        self._state, _ = reduce(Init(), State())

    @property
    def state(self) -> State:
        return self._state

    def set_executor(self, executor: Callable[[Iterable[Effect]], None]) -> None:
        self._executor = executor

    def dispatch(self, event: Event) -> List[Effect]:
        with self._lock:
            self._state, effects = reduce(event, self._state)
        if self._executor is not None:
            self._executor(effects)
        return effects

    def statistics(self) -> Dict[str, Dict[str, int]]:
        return {timer_id: stats.to_dict() for timer_id, stats in self._state.statistics.items()}

    def timer_ids(self) -> List[str]:
        return self._state.timer_ids()

    # ---- transport session table (sid -> timer id) ----

    def bind(self, sid: str, timer_id: str) -> bool:
        with self._lock:
            if sid in self._sessions:
                return False
            self._sessions[sid] = timer_id
            return True

    def unbind(self, sid: str) -> Optional[str]:
        with self._lock:
            return self._sessions.pop(sid, None)

    def timer_for(self, sid: str) -> Optional[str]:
        return self._sessions.get(sid)
