# simlogbook/constants/connection.py

class SimConnectionConstants:
    """Shared constants for simulator connections."""

    SUPPORTED_SIMS = ("MSFS", "XP12")

    # X-Plane plugin stream
    DEFAULT_HOST = "127.0.0.1"
    DEFAULT_PORT = 52000
    DEFAULT_TIMEOUT = 1.0
    RECV_SIZE = 4096

    # Native SDK polling
    POLL_INTERVAL = 1.0
    CLIENT_NAME = "Logbook"
    DEFINE_ID = 0
    REQUEST_ID = 0
