"""Pure state transitions for the timer relay.

``reduce`` takes an event and the previous ``State`` and returns the next
``State`` together with the effects the transport must run, in order. It
never performs I/O and never mutates the state it is given.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Tuple

from .connection import Connection, connections_for, without_handle
from .effects import Close, Effect, SendTo, batch, none
from .events import (
    Connect,
    Disconnect,
    ElectOwner,
    Event,
    Init,
    OwnerMessage,
    PeerMessage,
    RecomputeStatisticsFromConnections,
    RecomputeStatisticsFromMessage,
)
from .ownership import elect_owner, find_owner
from .statistics import Statistics, extract_statistics, merge_stats


@dataclass(frozen=True)
class State:
    connections: Tuple[Connection, ...] = ()
    statistics: Dict[str, Statistics] = field(default_factory=dict)

    def timer_ids(self) -> List[str]:
        seen = []
        for connection in self.connections:
            if connection.timer_id not in seen:
                seen.append(connection.timer_id)
        return seen


Transition = Tuple[State, List[Effect]]


def _init(event: Init, state: State) -> Transition:
    return State(), none()


def _connect(event: Connect, state: State) -> Transition:
    connection = Connection(event.handle, event.timer_id)
    state = replace(state, connections=state.connections + (connection,))
    return _settle(state, event.timer_id)


def _disconnect(event: Disconnect, state: State) -> Transition:
    state = replace(state, connections=without_handle(state.connections, event.handle))
    state, effects = _settle(state, event.timer_id)
    return state, batch([Close(event.handle)], effects)


def _peer_message(event: PeerMessage, state: State) -> Transition:
    relays = [
        SendTo(c.handle, event.payload)
        for c in connections_for(state.connections, event.timer_id)
        if c.handle != event.handle
    ]
    state, _ = _statistics_from_message(
        RecomputeStatisticsFromMessage(event.timer_id, event.payload), state
    )
    return state, batch(relays)


def _owner_message(event: OwnerMessage, state: State) -> Transition:
    owner = find_owner(state.connections, event.timer_id)
    if owner is None or owner.handle == event.handle:
        return state, none()
    return state, [SendTo(owner.handle, event.payload)]


def _statistics_from_message(event: RecomputeStatisticsFromMessage, state: State) -> Transition:
    patch = extract_statistics(event.payload)
    # A timer with nobody connected has no entry and must not gain one here.
    if not patch or not connections_for(state.connections, event.timer_id):
        return state, none()
    statistics = {
        **state.statistics,
        event.timer_id: merge_stats(state.statistics.get(event.timer_id), patch),
    }
    return replace(state, statistics=statistics), none()


def _statistics_from_connections(event: RecomputeStatisticsFromConnections, state: State) -> Transition:
    count = len(connections_for(state.connections, event.timer_id))
    statistics = {k: v for k, v in state.statistics.items() if k != event.timer_id}
    if count > 0:
        statistics[event.timer_id] = merge_stats(
            state.statistics.get(event.timer_id), {'connections': count}
        )
    return replace(state, statistics=statistics), none()


def _elect_owner(event: ElectOwner, state: State) -> Transition:
    connections, notices = elect_owner(state.connections, event.timer_id)
    if connections is state.connections and not notices:
        return state, none()
    return replace(state, connections=connections), batch(notices)


def _settle(state: State, timer_id: str) -> Transition:
    """Re-elect and recount a timer after its registry changed.

    Both steps run inside the mutating transition so no caller can observe
    a registry change without the matching owner and statistics.
    """
    state, notices = _elect_owner(ElectOwner(timer_id), state)
    state, counted = _statistics_from_connections(RecomputeStatisticsFromConnections(timer_id), state)
    return state, batch(notices, counted)


_HANDLERS: Dict[type, Callable[..., Transition]] = {
    Init: _init,
    Connect: _connect,
    Disconnect: _disconnect,
    PeerMessage: _peer_message,
    OwnerMessage: _owner_message,
    RecomputeStatisticsFromMessage: _statistics_from_message,
    RecomputeStatisticsFromConnections: _statistics_from_connections,
    ElectOwner: _elect_owner,
}


def reduce(event: Event, state: State) -> Transition:
    try:
        handler = _HANDLERS[type(event)]
    except KeyError:
        raise TypeError(f"unsupported event: {type(event).__name__}") from None
    return handler(event, state)
