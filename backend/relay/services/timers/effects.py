"""Side effects the reducer asks the transport to perform."""

from dataclasses import dataclass
from typing import Iterable, List, Union

from .connection import Handle


@dataclass(frozen=True)
class SendTo:
    handle: Handle
    payload: str


@dataclass(frozen=True)
class Close:
    handle: Handle


@dataclass(frozen=True)
class NotifyOwnership:
    handle: Handle
    is_owner: bool


@dataclass(frozen=True)
class NoOp:
    pass


Effect = Union[SendTo, Close, NotifyOwnership, NoOp]


def none() -> List[Effect]:
    return [NoOp()]


def batch(*groups: Iterable[Effect]) -> List[Effect]:
    """Concatenate effect groups in order, dropping NoOps.

    An empty result collapses back to a single NoOp so every transition
    reports at least one effect.
    """
    combined = [e for group in groups for e in group if not isinstance(e, NoOp)]
    return combined or none()
