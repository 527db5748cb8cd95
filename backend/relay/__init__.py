from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def split_setting(value):
    """Turn a comma separated config value into a list of non-empty items."""
    if isinstance(value, (list, tuple, set)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [v.strip() for v in (value or '').split(',') if v.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = split_setting(flask_app.config.get('CORS_ALLOWED_ORIGINS'))
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One store per app; effects run against this app's Socket.IO server
    from relay.services.timers import Store
    from relay.services.timers.interpreter import EffectInterpreter
    store = Store(EffectInterpreter(socketio, flask_app.logger))
    flask_app.extensions['timer_store'] = store

    from relay.main import main
    flask_app.register_blueprint(main)

    from relay.socketio_events import register_socketio_handlers
    register_socketio_handlers(
        namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/ws'),
        testing=flask_app.config.get('TESTING', False),
    )

    from relay.services.timers.housekeeping import start_housekeeping
    start_housekeeping(flask_app, socketio, store)

    return flask_app
