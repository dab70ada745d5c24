import random

import pytest

from bingo.services.games.errors import TicketConfigError
from bingo.services.games.tickets import Ticket, create_ticket


def test_default_ticket_shape_and_distinct_numbers():
    rng = random.Random(5)
    for _ in range(200):
        ticket = create_ticket(rng=rng)
        assert len(ticket.rows) == 3
        assert all(len(row) == 7 for row in ticket.rows)
        numbers = [n for row in ticket.rows for n in row]
        assert len(set(numbers)) == 21
        assert all(0 <= n < 100 for n in numbers)
        assert ticket.line_announced == [False, False, False]
        assert ticket.won is False


@pytest.mark.parametrize('range_size', [21, 22, 30, 100])
def test_distinct_for_small_ranges(range_size):
    rng = random.Random(range_size)
    for _ in range(50):
        ticket = create_ticket(3, 7, range_size, rng)
        numbers = [n for row in ticket.rows for n in row]
        assert len(set(numbers)) == 21
        assert max(numbers) < range_size


def test_geometry_larger_than_range_is_rejected():
    with pytest.raises(TicketConfigError):
        create_ticket(3, 7, 20)


def test_line_announcement_is_one_shot():
    ticket = Ticket([[1, 2], [3, 4]])
    assert ticket.announce_line(1) is True
    assert ticket.announce_line(1) is False
    assert ticket.line_announced == [False, True]
    assert not ticket.all_lines_announced()


def test_to_dict():
    ticket = Ticket([[1, 2], [3, 4]])
    ticket.announce_line(0)
    assert ticket.to_dict() == {
        'rows': [[1, 2], [3, 4]],
        'line_announced': [True, False],
        'won': False,
    }
