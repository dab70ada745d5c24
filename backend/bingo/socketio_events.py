from flask import current_app, request
from flask_socketio import emit

from bingo import socketio
from bingo.services.games.session import GameSession


def _session() -> GameSession:
    return current_app.extensions['bingo_session']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    session = _session()
    session.connect(_get_sid())
    emit('estado-inicial', session.state())


def handle_disconnect(reason=None):
    _session().disconnect(_get_sid())


def handle_request_tickets(data=None):
    count = data.get('count', 1) if isinstance(data, dict) else 1
    tickets = _session().request_tickets(_get_sid(), count)
    if tickets is None:
        emit('error', {'message': 'unknown connection'})
        return
    emit('cartones', {'tickets': [t.to_dict() for t in tickets]})


def handle_start_game(data=None):
    started = _session().start()
    emit('iniciar-ack', {'started': started})


def handle_query_state(data=None):
    emit('estado-actual', _session().state())


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the game namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('request-cartones', handle_request_tickets, namespace=namespace)
    socketio.on_event('iniciar-juego', handle_start_game, namespace=namespace)
    socketio.on_event('estado', handle_query_state, namespace=namespace)
