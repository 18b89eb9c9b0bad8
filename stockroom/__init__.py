"""Inventory management with a terminal menu, a desktop window and a local SQLite database."""

__version__ = "0.1.0"