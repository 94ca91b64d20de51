"""Payment record service with a JSON mirror and websocket push channel."""

__version__ = "0.1.0"
