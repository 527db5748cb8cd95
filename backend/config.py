import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of origins allowed for HTTP and Socket.IO
    CORS_ALLOWED_ORIGINS = os.environ.get(
        'CORS_ALLOWED_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
    )
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    # Message types routed to the timer owner instead of broadcast to peers
    OWNER_MESSAGE_TYPES = os.environ.get('OWNER_MESSAGE_TYPES', 'client:new')
    MAX_MESSAGE_BYTES = int(os.environ.get('MAX_MESSAGE_BYTES', '65536'))
    # Periodic re-election / connection recount (sec). 0 disables.
    HOUSEKEEPING_INTERVAL_SEC = int(os.environ.get('HOUSEKEEPING_INTERVAL_SEC', '0'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
