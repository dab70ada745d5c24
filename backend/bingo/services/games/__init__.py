"""Game domain services: draw pool, tickets, win detection and the session.

This package contains the transport-free game engine that socket handlers
and HTTP routes import, keeping Socket.IO concerns separated from core game
mechanics.
"""

from .session import GameSession

__all__ = ['GameSession']
