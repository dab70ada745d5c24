"""Session controller: the Idle/Running state machine behind the shared game.

One `GameSession` exists per app. It owns the draw pool, the client registry
and the active draw timer, and is the only thing that mutates them. Every
public method takes the same re-entrant lock, so socket handlers and timer
ticks are serialized.
"""

import logging
import random
import threading
from typing import Any, Dict, List, Optional

from .detector import BingoEvent, LineEvent, scan_for_winners
from .pool import DrawPool
from .registry import Client, ClientRegistry
from .scheduler import DrawTimer
from .tickets import Ticket, create_ticket, validate_ticket_geometry


IDLE = 'idle'
RUNNING = 'running'

EXHAUSTED_REASON = 'Numbers exhausted'


def clamp_ticket_count(raw: Any, maximum: int) -> int:
    """Coerce a requested ticket count into 1..maximum. Garbage becomes 1."""
    try:
        count = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, min(count, maximum))


class GameSession:
    def __init__(self, gateway, scheduler, *, range_size: int = 100, draw_interval: float = 5,
                 ticket_rows: int = 3, ticket_row_size: int = 7, max_tickets_per_request: int = 10,
                 rng: Optional[random.Random] = None, logger: Optional[logging.Logger] = None):
        validate_ticket_geometry(ticket_rows, ticket_row_size, range_size)
        self.gateway = gateway
        self.scheduler = scheduler
        self.range_size = range_size
        self.draw_interval = draw_interval
        self.max_tickets_per_request = max_tickets_per_request
        self.logger = logger or logging.getLogger(__name__)
        self._rng = rng or random.Random()
        self.registry = ClientRegistry(
            lambda: create_ticket(ticket_rows, ticket_row_size, range_size, self._rng)
        )
        self.phase = IDLE
        self.pool: Optional[DrawPool] = None
        self._timer: Optional[DrawTimer] = None
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return self.phase == RUNNING

    # ---- read-only views ----

    def _remaining(self) -> int:
        return self.pool.remaining_count() if self.pool else 0

    def _history(self) -> List[int]:
        return list(self.pool.drawn_history()) if self.pool else []

    def state(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'running': self.running,
                'remaining': self._remaining(),
                'drawn_history': self._history(),
            }

    # ---- client lifecycle ----

    def connect(self, client_id: str) -> Client:
        with self._lock:
            client = self.registry.register(client_id)
            self.logger.info(f"[connect] client={client_id} name={client.name} clients={len(self.registry)}")
            return client

    def disconnect(self, client_id: str) -> None:
        with self._lock:
            self.registry.remove(client_id)
            self.logger.info(f"[disconnect] client={client_id} clients={len(self.registry)}")

    def request_tickets(self, client_id: str, count: Any = 1) -> Optional[List[Ticket]]:
        """Give the client `count` more tickets (clamped). None if the client is gone."""
        with self._lock:
            n = clamp_ticket_count(count, self.max_tickets_per_request)
            tickets = self.registry.add_tickets(client_id, n)
            if tickets is None:
                self.logger.info(f"[tickets] client={client_id} unknown, ignoring request")
                return None
            self.logger.info(f"[tickets] client={client_id} requested={count!r} added={n} total={len(tickets)}")
            return tickets

    # ---- state machine ----

    def start(self) -> bool:
        """Idle -> Running. Returns False, with no side effects, if already running."""
        with self._lock:
            if self.phase != IDLE:
                self.logger.info("[start-rejected] game already running")
                return False
            self.pool = DrawPool(self.range_size, self._rng)
            self.phase = RUNNING
            self.gateway.send_to_all('juego-iniciado', {'remaining': self.pool.remaining_count()})
            self.logger.info(f"[game-start] remaining={self.pool.remaining_count()} clients={len(self.registry)}")
            self._timer = self.scheduler.schedule(self.draw_interval, self.tick)
            return True

    def stop(self, reason: str) -> None:
        """Cancel the draw timer, go Idle and tell everyone. Safe from any phase."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
                self.logger.info("[timer-cancel]")
            self.phase = IDLE
            self.gateway.send_to_all('juego-terminado', {
                'reason': reason,
                'drawn_history': self._history(),
                'remaining': self._remaining(),
            })
            self.logger.info(f"[game-end] reason={reason!r} drawn={len(self._history())}")

    def tick(self, timer: Optional[DrawTimer] = None) -> None:
        """One draw-and-evaluate cycle. `timer` is the handle firing it, if any."""
        with self._lock:
            if timer is not None and timer is not self._timer:
                self.logger.info("[timer-abort] stale timer")
                return
            if self.phase != RUNNING:
                self.logger.info(f"[timer-abort] phase={self.phase}")
                return

            number = self.pool.draw_random()
            if number is None:
                self.stop(EXHAUSTED_REASON)
                return

            history = self._history()
            self.gateway.send_to_all('numero', {
                'number': number,
                'drawn_history': history,
                'remaining': self.pool.remaining_count(),
            })
            self.logger.debug(f"[draw] number={number} remaining={self.pool.remaining_count()}")

            snapshot = self.registry.snapshot()
            names = {cid: c.name for cid, c in snapshot}
            for event in scan_for_winners(set(history), snapshot):
                name = names.get(event.client_id)
                if isinstance(event, LineEvent):
                    self._announce_line(event, name)
                elif isinstance(event, BingoEvent):
                    self._announce_bingo(event, name)
                    self.stop(f"BINGO: {name} (ticket {event.ticket_index + 1})")
                    # first bingo ends the game; the rest of this batch is dropped
                    return

    def _announce_line(self, event: LineEvent, name: Optional[str]) -> None:
        self.logger.info(
            f"[line] client={event.client_id} ticket={event.ticket_index} row={event.row_index}"
        )
        self.gateway.send_to(event.client_id, 'linea', {
            'ticket_index': event.ticket_index,
            'row_index': event.row_index,
            'message': f"Ticket {event.ticket_index + 1}: LINE! (row {event.row_index + 1})",
        })
        self.gateway.send_to_all('anuncio', {
            'kind': 'line',
            'client_id': event.client_id,
            'name': name,
            'ticket_index': event.ticket_index,
        })

    def _announce_bingo(self, event: BingoEvent, name: Optional[str]) -> None:
        self.logger.info(f"[bingo] client={event.client_id} ticket={event.ticket_index}")
        self.gateway.send_to(event.client_id, 'bingo', {
            'ticket_index': event.ticket_index,
            'message': f"BINGO on your ticket {event.ticket_index + 1}!",
        })
        self.gateway.send_to_all('anuncio', {
            'kind': 'bingo',
            'client_id': event.client_id,
            'name': name,
            'ticket_index': event.ticket_index,
        })
