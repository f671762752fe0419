"""Telemetry model, HTML dashboard views and a mock telemetry feed for an unmanned surface vehicle."""

__version__ = "0.1.0"
__all__ = ["dashboard", "models", "views"]