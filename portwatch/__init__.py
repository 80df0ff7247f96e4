"""Thread-safe building blocks for probing TCP ports, tracking their state and deciding when to alert."""

__version__ = "0.1.0"