from typing import Callable, Dict, List, Optional, Tuple

from .errors import DuplicateClientError
from .tickets import Ticket


def display_name_for(client_id: str) -> str:
    return f"Player-{client_id[:5]}"


class Client:
    def __init__(self, client_id: str, name: str, tickets: Optional[List[Ticket]] = None):
        self.id = client_id
        self.name = name
        self.tickets: List[Ticket] = list(tickets or [])


class ClientRegistry:
    """Connection id -> Client. Records live exactly as long as the connection."""

    def __init__(self, ticket_factory: Callable[[], Ticket]):
        self._ticket_factory = ticket_factory
        self._clients: Dict[str, Client] = {}

    def __contains__(self, client_id: str) -> bool:
        return client_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def get(self, client_id: str) -> Optional[Client]:
        return self._clients.get(client_id)

    def register(self, client_id: str) -> Client:
        if client_id in self._clients:
            raise DuplicateClientError(f"client {client_id} already registered")
        client = Client(client_id, display_name_for(client_id))
        self._clients[client_id] = client
        return client

    def add_tickets(self, client_id: str, count: int = 1) -> Optional[List[Ticket]]:
        """Append `count` fresh tickets. Returns the client's tickets, or None if unknown."""
        client = self._clients.get(client_id)
        if client is None:
            return None
        for _ in range(count):
            client.tickets.append(self._ticket_factory())
        return client.tickets

    def remove(self, client_id: str) -> None:
        self._clients.pop(client_id, None)

    def snapshot(self) -> Tuple[Tuple[str, Client], ...]:
        # Fresh Client shells with copied ticket lists; Ticket objects are
        # shared so flags set during a scan stick.
        return tuple(
            (cid, Client(c.id, c.name, c.tickets)) for cid, c in self._clients.items()
        )
