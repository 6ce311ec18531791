"""Player skill standings and vocation-derived maxima for a game server."""

__version__ = "0.1.0"
