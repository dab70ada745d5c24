class BingoError(Exception):
    """Base class for game engine errors."""


class TicketConfigError(BingoError):
    """Ticket geometry cannot be satisfied by the number range."""


class DuplicateClientError(BingoError):
    """A connection id was registered twice."""
