from typing import Any, Dict


class SocketIOGateway:
    """Outbound delivery over Flask-SocketIO: one connection or everyone on the namespace."""

    def __init__(self, socketio, namespace: str = '/ws'):
        self.socketio = socketio
        self.namespace = namespace

    def send_to(self, client_id: str, event: str, payload: Dict[str, Any]) -> None:
        # socketio.emit works from background tasks, unlike flask_socketio.emit
        self.socketio.emit(event, payload, to=client_id, namespace=self.namespace)

    def send_to_all(self, event: str, payload: Dict[str, Any]) -> None:
        self.socketio.emit(event, payload, namespace=self.namespace)
