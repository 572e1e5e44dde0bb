"""In-memory airline booking simulator."""

__version__ = "0.1.0"
