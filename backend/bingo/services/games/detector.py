from typing import AbstractSet, Iterable, List, NamedTuple, Tuple, Union

from .registry import Client


class LineEvent(NamedTuple):
    client_id: str
    ticket_index: int
    row_index: int


class BingoEvent(NamedTuple):
    client_id: str
    ticket_index: int


WinEvent = Union[LineEvent, BingoEvent]


def scan_for_winners(drawn: AbstractSet[int],
                     snapshot: Iterable[Tuple[str, Client]]) -> List[WinEvent]:
    """Apply the drawn numbers to every ticket and collect new lines and bingos.

    Clients are visited in snapshot order, tickets in ownership order and rows
    in card order, so the event list is deterministic for a given tick. Ticket
    flags are updated in place; tickets that already won are skipped.
    """
    events: List[WinEvent] = []
    for client_id, client in snapshot:
        for ticket_index, ticket in enumerate(client.tickets):
            if ticket.won:
                continue
            for row_index, row in enumerate(ticket.rows):
                if all(n in drawn for n in row) and ticket.announce_line(row_index):
                    events.append(LineEvent(client_id, ticket_index, row_index))
            if ticket.all_lines_announced():
                ticket.won = True
                events.append(BingoEvent(client_id, ticket_index))
    return events
