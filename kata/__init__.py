"""Small worked exercises: numeric helpers, parsers, a protobuf decoder, widgets, concurrency demos and a websocket chat."""

__version__ = "0.1.0"