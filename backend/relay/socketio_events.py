import json
from flask import current_app, request
from flask_socketio import emit
from relay import socketio, split_setting
from relay.services.timers import (
    Connect,
    Disconnect,
    Handle,
    OwnerMessage,
    PeerMessage,
)


def _store():
    return current_app.extensions['timer_store']


def _handle() -> Handle:
    # request.sid / request.namespace exist in Socket.IO context
    return Handle(request.sid, request.namespace)  # type: ignore


def _normalize_timer_id(value):
    if value is None:
        return None
    timer_id = str(value).strip()
    return timer_id or None


def _join(timer_id: str) -> bool:
    handle = _handle()
    if not _store().bind(handle.sid, timer_id):
        emit('error', {'message': 'already joined a timer'})
        return False
    _store().dispatch(Connect(handle, timer_id))
    current_app.logger.info(f"[join] sid={handle.sid} timer={timer_id}")
    emit('joined', {'timer_id': timer_id})
    return True


def handle_connect(auth=None):
    emit('connected', {'message': f"Connected to {request.namespace}"})  # type: ignore
    timer_id = _normalize_timer_id(request.args.get('timer_id'))
    if timer_id:
        _join(timer_id)


def handle_disconnect(reason=None):
    handle = _handle()
    timer_id = _store().unbind(handle.sid)
    if not timer_id:
        return
    current_app.logger.info(f"[disconnect] sid={handle.sid} timer={timer_id} reason={reason}")
    _store().dispatch(Disconnect(handle, timer_id))


def handle_join_timer(data):
    timer_id = _normalize_timer_id((data or {}).get('timer_id'))
    if not timer_id:
        emit('error', {'message': 'timer_id is required'})
        return
    _join(timer_id)


def handle_leave_timer(data=None):
    handle = _handle()
    timer_id = _store().unbind(handle.sid)
    if not timer_id:
        emit('error', {'message': 'not joined to a timer'})
        return
    emit('left', {'timer_id': timer_id})
    current_app.logger.info(f"[leave] sid={handle.sid} timer={timer_id}")
    # Disconnect closes this socket as its first effect
    _store().dispatch(Disconnect(handle, timer_id))


def _message_type(payload: str):
    try:
        message = json.loads(payload)
    except (ValueError, RecursionError):
        return None
    if not isinstance(message, dict):
        return None
    message_type = message.get('type')
    return message_type if isinstance(message_type, str) else None


def handle_message(data):
    handle = _handle()
    timer_id = _store().timer_for(handle.sid)
    if not timer_id:
        emit('error', {'message': 'join a timer before sending messages'})
        return
    payload = data if isinstance(data, str) else json.dumps(data)
    if len(payload.encode('utf-8')) > int(current_app.config.get('MAX_MESSAGE_BYTES', 65536)):
        emit('error', {'message': 'message too large'})
        return

    owner_types = split_setting(current_app.config.get('OWNER_MESSAGE_TYPES'))
    if _message_type(payload) in owner_types:
        _store().dispatch(OwnerMessage(handle, timer_id, payload))
    else:
        _store().dispatch(PeerMessage(handle, timer_id, payload))


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(namespace: str = '/ws', testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on the configured namespace. When testing is True, also
    mirror handlers on the default namespace '/' to accommodate the test
    harness.
    """
    namespaces = [namespace]
    if testing and namespace != '/':
        namespaces.append('/')
    for ns in namespaces:
        socketio.on_event('connect', handle_connect, namespace=ns)
        socketio.on_event('disconnect', handle_disconnect, namespace=ns)
        socketio.on_event('join_timer', handle_join_timer, namespace=ns)
        socketio.on_event('leave_timer', handle_leave_timer, namespace=ns)
        socketio.on_event('message', handle_message, namespace=ns)
        socketio.on_event('ping', handle_ping, namespace=ns)
