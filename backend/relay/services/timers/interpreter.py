import json
from typing import Iterable

from .effects import Close, Effect, NoOp, NotifyOwnership, SendTo


OWNERSHIP_MESSAGE_TYPE = 'timer:ownership'


def ownership_payload(is_owner: bool) -> str:
    return json.dumps({'type': OWNERSHIP_MESSAGE_TYPE, 'isOwner': is_owner})


class EffectInterpreter:
    """Runs reducer effects against a Flask-SocketIO server.

    Sends and closes aimed at a session that is already gone are skipped;
    the transport reports that session through its own disconnect event.
    """

    def __init__(self, socketio, logger):
        self.socketio = socketio
        self.logger = logger

    def __call__(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            try:
                self.execute(effect)
            except Exception as exc:
                self.logger.warning(f"[effect-failed] effect={effect!r} error={exc}")

    def execute(self, effect: Effect) -> None:
        if isinstance(effect, NoOp):
            return
        if not self._is_connected(effect.handle):
            self.logger.debug(f"[effect-skip] sid={effect.handle.sid} no longer connected")
            return
        if isinstance(effect, SendTo):
            self._send(effect.handle, effect.payload)
        elif isinstance(effect, NotifyOwnership):
            self._send(effect.handle, ownership_payload(effect.is_owner))
        elif isinstance(effect, Close):
            self.logger.info(f"[close] sid={effect.handle.sid}")
            self.socketio.server.disconnect(effect.handle.sid, namespace=effect.handle.namespace)
        else:
            raise TypeError(f"unsupported effect: {type(effect).__name__}")

    def _send(self, handle, payload) -> None:
        self.socketio.emit('message', payload, to=handle.sid, namespace=handle.namespace)

    def _is_connected(self, handle) -> bool:
        return self.socketio.server.manager.is_connected(handle.sid, handle.namespace)
