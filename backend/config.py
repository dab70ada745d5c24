import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Draw cadence (seconds)
    DRAW_INTERVAL_SEC = int(os.environ.get('DRAW_INTERVAL_SEC', '5'))
    # Numbers 0..NUMBER_RANGE-1 go into the pool
    NUMBER_RANGE = int(os.environ.get('NUMBER_RANGE', '100'))
    # Ticket geometry
    TICKET_ROWS = int(os.environ.get('TICKET_ROWS', '3'))
    TICKET_ROW_SIZE = int(os.environ.get('TICKET_ROW_SIZE', '7'))
    # Upper clamp for a single ticket request
    MAX_TICKETS_PER_REQUEST = int(os.environ.get('MAX_TICKETS_PER_REQUEST', '10'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000',
        ).split(',') if o.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
