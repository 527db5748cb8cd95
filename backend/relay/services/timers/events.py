"""Events the reducer understands.

Inbound events come from the Socket.IO handlers; the rest are internal
triggers (housekeeping timer, tests) that re-run a single step.
"""

from dataclasses import dataclass
from typing import Union

from .connection import Handle


@dataclass(frozen=True)
class Init:
    pass


@dataclass(frozen=True)
class Connect:
    handle: Handle
    timer_id: str


@dataclass(frozen=True)
class Disconnect:
    handle: Handle
    timer_id: str


@dataclass(frozen=True)
class PeerMessage:
    handle: Handle
    timer_id: str
    payload: str


@dataclass(frozen=True)
class OwnerMessage:
    handle: Handle
    timer_id: str
    payload: str


@dataclass(frozen=True)
class RecomputeStatisticsFromMessage:
    timer_id: str
    payload: str


@dataclass(frozen=True)
class RecomputeStatisticsFromConnections:
    timer_id: str


@dataclass(frozen=True)
class ElectOwner:
    timer_id: str


Event = Union[
    Init,
    Connect,
    Disconnect,
    PeerMessage,
    OwnerMessage,
    RecomputeStatisticsFromMessage,
    RecomputeStatisticsFromConnections,
    ElectOwner,
]
