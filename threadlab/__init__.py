"""Thread synchronisation demos, a bounded shared buffer, robust I/O and socket helpers."""

__version__ = "0.1.0"
__all__ = ["counters", "greetings", "net", "rio", "sbuf"]