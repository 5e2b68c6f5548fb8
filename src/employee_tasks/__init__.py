"""Per-employee todo/done task lists."""

__version__ = "0.1.0"
