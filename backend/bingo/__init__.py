from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    from bingo.logging_config import configure_logging
    configure_logging(flask_app)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One shared game per process; handlers reach it via current_app.extensions
    from bingo.services.games.gateway import SocketIOGateway
    from bingo.services.games.scheduler import DrawScheduler
    from bingo.services.games.session import GameSession

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')
    flask_app.extensions['bingo_session'] = GameSession(
        SocketIOGateway(socketio, namespace),
        DrawScheduler(flask_app, socketio),
        range_size=int(flask_app.config.get('NUMBER_RANGE', 100)),
        draw_interval=float(flask_app.config.get('DRAW_INTERVAL_SEC', 5)),
        ticket_rows=int(flask_app.config.get('TICKET_ROWS', 3)),
        ticket_row_size=int(flask_app.config.get('TICKET_ROW_SIZE', 7)),
        max_tickets_per_request=int(flask_app.config.get('MAX_TICKETS_PER_REQUEST', 10)),
        logger=flask_app.logger,
    )

    from bingo.routes import main
    flask_app.register_blueprint(main)

    # Register Socket.IO event handlers
    from bingo.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    return flask_app
