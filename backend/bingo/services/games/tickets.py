import random
from typing import List, Optional, Sequence

from .errors import TicketConfigError


class Ticket:
    """A player's card: fixed rows of numbers that are distinct across the whole card.

    `line_announced` and `won` only ever move from False to True.
    """

    def __init__(self, rows: Sequence[Sequence[int]]):
        self.rows = tuple(tuple(r) for r in rows)
        self.line_announced: List[bool] = [False] * len(self.rows)
        self.won = False

    def announce_line(self, row_index: int) -> bool:
        """Flag a row as announced. Returns True only on the first call for that row."""
        if self.line_announced[row_index]:
            return False
        self.line_announced[row_index] = True
        return True

    def all_lines_announced(self) -> bool:
        return all(self.line_announced)

    def to_dict(self):
        return {
            'rows': [list(r) for r in self.rows],
            'line_announced': list(self.line_announced),
            'won': self.won,
        }


def validate_ticket_geometry(rows: int, per_row: int, range_size: int) -> None:
    if rows < 1 or per_row < 1:
        raise TicketConfigError(f"ticket needs at least one row and one number per row (got {rows}x{per_row})")
    if rows * per_row > range_size:
        raise TicketConfigError(
            f"{rows}x{per_row} ticket needs {rows * per_row} distinct numbers but range has {range_size}"
        )


def create_ticket(rows: int = 3, per_row: int = 7, range_size: int = 100,
                  rng: Optional[random.Random] = None) -> Ticket:
    """Sample rows*per_row distinct numbers from the full range and split them into rows.

    The live draw pool is not consulted; a ticket may hold numbers that were
    already drawn.
    """
    validate_ticket_geometry(rows, per_row, range_size)
    rng = rng or random
    numbers = rng.sample(range(range_size), rows * per_row)
    return Ticket([numbers[i * per_row:(i + 1) * per_row] for i in range(rows)])
