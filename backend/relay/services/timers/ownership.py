from dataclasses import replace
from typing import List, Optional, Tuple

from .connection import Connection
from .effects import Effect, NotifyOwnership


def _first_index(connections: Tuple[Connection, ...], timer_id: str) -> Optional[int]:
    for index, connection in enumerate(connections):
        if connection.timer_id == timer_id:
            return index
    return None


def elect_owner(connections: Tuple[Connection, ...], timer_id: str) -> Tuple[Tuple[Connection, ...], List[Effect]]:
    """Make the earliest connection on ``timer_id`` its owner.

    Other connections keep their current flag; the reducer runs this after
    every registry change, so the only connection that can already be flagged
    on this timer is the earliest one. Returns the new registry and the
    ownership notifications (elected first, then everyone else on the timer
    in arrival order). An empty timer elects nobody.
    """
    first = _first_index(connections, timer_id)
    if first is None:
        return connections, []

    elected = tuple(
        replace(c, is_owner=True) if index == first else c
        for index, c in enumerate(connections)
    )
    notices: List[Effect] = [NotifyOwnership(elected[first].handle, True)]
    notices.extend(
        NotifyOwnership(c.handle, False)
        for index, c in enumerate(elected)
        if c.timer_id == timer_id and index != first
    )
    return elected, notices


def find_owner(connections: Tuple[Connection, ...], timer_id: str) -> Optional[Connection]:
    for connection in connections:
        if connection.timer_id == timer_id and connection.is_owner:
            return connection
    return None
