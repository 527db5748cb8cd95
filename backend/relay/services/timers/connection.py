from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Handle:
    """Opaque reference to a Socket.IO session.

    The core only stores and compares handles; the interpreter is the one
    place that turns them back into emits and disconnects.
    """
    sid: str
    namespace: str = '/ws'


@dataclass(frozen=True)
class Connection:
    handle: Handle
    timer_id: str
    is_owner: bool = False


def connections_for(connections: Iterable[Connection], timer_id: str) -> Tuple[Connection, ...]:
    return tuple(c for c in connections if c.timer_id == timer_id)


def without_handle(connections: Iterable[Connection], handle: Handle) -> Tuple[Connection, ...]:
    return tuple(c for c in connections if c.handle != handle)
