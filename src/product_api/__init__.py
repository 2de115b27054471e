"""In-memory product catalogue served over HTTP."""

__version__ = "1.0.0"
