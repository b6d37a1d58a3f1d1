"""Staged digital logic network simulator with a NOR-latch demonstration command."""

__version__ = "0.1.0"
__all__ = ["logic", "cli"]