"""Timer relay domain: registry, ownership, statistics and the reducer.

This package contains the pure transition logic imported by the Socket.IO
handlers and HTTP routes, keeping transport concerns separated from the
relay rules.
"""

from .connection import Connection, Handle
from .effects import Close, NoOp, NotifyOwnership, SendTo
from .events import (
    Connect,
    Disconnect,
    ElectOwner,
    Init,
    OwnerMessage,
    PeerMessage,
    RecomputeStatisticsFromConnections,
    RecomputeStatisticsFromMessage,
)
from .reducer import State, reduce
from .statistics import DEFAULT_STATISTICS, Statistics, extract_statistics, merge_stats
from .store import Store
