import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Statistics:
    mobbers: int = 0
    goals: int = 0
    connections: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


DEFAULT_STATISTICS = Statistics()

_FIELDS = frozenset(f.name for f in fields(Statistics))

# message type -> (array field in the payload, statistics field it counts into)
_COUNTED_FIELDS = {
    'goals:update': ('goals', 'goals'),
    'mob:update': ('mob', 'mobbers'),
}


def merge_stats(previous: Optional[Statistics], patch: Dict[str, Any]) -> Statistics:
    """Overlay ``patch`` on ``previous`` (or the defaults), last writer wins."""
    base = previous if previous is not None else DEFAULT_STATISTICS
    return replace(base, **{k: v for k, v in patch.items() if k in _FIELDS})


def extract_statistics(payload) -> Dict[str, int]:
    """Return the statistics fields a relayed payload carries.

    Payloads that do not decode to a recognised message yield an empty patch.
    """
    try:
        message = json.loads(payload)
    except (TypeError, ValueError, RecursionError):
        return {}
    if not isinstance(message, dict):
        return {}

    message_type = message.get('type')
    if not isinstance(message_type, str):
        return {}
    counted = _COUNTED_FIELDS.get(message_type)
    if not counted:
        return {}
    source, target = counted
    values = message.get(source)
    if not isinstance(values, list):
        return {}
    return {target: len(values)}
