"""
Telemetry Streaming Server

FastAPI app streaming simulated sensor data over server-sent events.
"""

from .server import create_app, app

__all__ = ['create_app', 'app']
