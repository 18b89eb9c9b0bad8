"""Persistent inventory storage backed by an SQLite database."""

from __future__ import annotations

import logging
import os
import sqlite3
from typing import Union

from .models import InventoryItem

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

MAX_ID_LENGTH = 50
MAX_NAME_LENGTH = 100
# DECIMAL(10, 2): eight digits before the point, two after.
PRICE_LIMIT = 10**8

_CREATE_TABLE = f"""
CREATE TABLE IF NOT EXISTS inventaris (
    id VARCHAR({MAX_ID_LENGTH}) PRIMARY KEY
        CHECK (length(id) <= {MAX_ID_LENGTH}),
    nama VARCHAR({MAX_NAME_LENGTH}) NOT NULL
        CHECK (length(nama) <= {MAX_NAME_LENGTH}),
    kuantitas INTEGER NOT NULL,
    harga REAL NOT NULL
        CHECK (harga > -{PRICE_LIMIT} AND harga < {PRICE_LIMIT})
)
"""

_SELECT = "SELECT id, nama, kuantitas, harga FROM inventaris"


class DatabaseError(Exception):
    """A database operation failed."""


class DuplicateItemError(DatabaseError):
    """An item with the same id is already stored."""


class NotConnectedError(DatabaseError):
    """The operation needs an open connection, and there is none."""


def _row_to_item(row: tuple) -> InventoryItem:
    item_id, name, quantity, price = row
    return InventoryItem(str(item_id), str(name), int(quantity), float(price))


class InventoryDatabase:
    """Stores inventory items in the ``inventaris`` table of an SQLite file."""

    def __init__(self, path: PathLike) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """Whether a connection is currently open."""
        return self._conn is not None

    def connect(self) -> InventoryDatabase:
        """Open the database and make sure the inventory table exists."""
        if self._conn is not None:
            return self
        try:
            conn = sqlite3.connect(os.fspath(self.path))
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not open database {self.path!r}: {exc}") from exc
        try:
            with conn:
                conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"could not create table 'inventaris': {exc}") from exc
        self._conn = conn
        logger.info("connected to %s; table 'inventaris' checked", self.path)
        return self

    def disconnect(self) -> None:
        """Close the connection if one is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("disconnected from %s", self.path)

    def __enter__(self) -> InventoryDatabase:
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise NotConnectedError("not connected to the database")
        return self._conn

    @staticmethod
    def _values(item: InventoryItem) -> tuple[str, int, float]:
        return item.name, int(item.quantity), round(float(item.price), 2)

    def add_item(self, item: InventoryItem) -> None:
        """Insert a new item; raises DuplicateItemError if its id exists."""
        conn = self._connection()
        name, quantity, price = self._values(item)
        try:
            with conn:
                conn.execute(
                    "INSERT INTO inventaris (id, nama, kuantitas, harga) VALUES (?, ?, ?, ?)",
                    (item.id, name, quantity, price),
                )
        except sqlite3.IntegrityError as exc:
            if "UNIQUE" in str(exc) or "PRIMARY KEY" in str(exc):
                raise DuplicateItemError(
                    f"item id {item.id!r} already exists in the database"
                ) from exc
            raise DatabaseError(f"could not add item {item.id!r}: {exc}") from exc
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not add item {item.id!r}: {exc}") from exc
        logger.info("item %r added", item.name)

    def all_items(self) -> list[InventoryItem]:
        """Return every stored item, ordered by id."""
        conn = self._connection()
        try:
            rows = conn.execute(f"{_SELECT} ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not read items: {exc}") from exc
        return [_row_to_item(row) for row in rows]

    def get_item(self, item_id: str) -> InventoryItem | None:
        """Return the item with this id, or None if there is none."""
        conn = self._connection()
        try:
            row = conn.execute(f"{_SELECT} WHERE id = ?", (item_id,)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not look up item {item_id!r}: {exc}") from exc
        return _row_to_item(row) if row is not None else None

    def update_item(self, item: InventoryItem) -> bool:
        """Overwrite name, quantity and price of the item with this id.

        Returns False when no item carries the id.
        """
        conn = self._connection()
        name, quantity, price = self._values(item)
        try:
            with conn:
                cursor = conn.execute(
                    "UPDATE inventaris SET nama = ?, kuantitas = ?, harga = ? WHERE id = ?",
                    (name, quantity, price, item.id),
                )
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not update item {item.id!r}: {exc}") from exc
        if cursor.rowcount > 0:
            logger.info("item %r updated", item.id)
            return True
        logger.info("item %r not found for update", item.id)
        return False

    def delete_item(self, item_id: str) -> bool:
        """Remove the item with this id; returns False when there was none."""
        conn = self._connection()
        try:
            with conn:
                cursor = conn.execute("DELETE FROM inventaris WHERE id = ?", (item_id,))
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not delete item {item_id!r}: {exc}") from exc
        if cursor.rowcount > 0:
            logger.info("item %r deleted", item_id)
            return True
        logger.info("item %r not found for deletion", item_id)
        return False