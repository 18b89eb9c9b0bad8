import sqlite3

import pytest

from stockroom.database import (
    DatabaseError,
    DuplicateItemError,
    InventoryDatabase,
    NotConnectedError,
)
from stockroom.models import InventoryItem


@pytest.fixture
def db(tmp_path):
    database = InventoryDatabase(tmp_path / "inventory.db")
    database.connect()
    yield database
    database.disconnect()


def test_connect_creates_table(tmp_path):
    path = tmp_path / "inventory.db"
    with InventoryDatabase(path):
        pass
    with sqlite3.connect(path) as raw:
        names = [row[0] for row in raw.execute("SELECT name FROM sqlite_master WHERE type='table'")]
    assert "inventaris" in names


def test_add_and_get_round_trip(db):
    item = InventoryItem("A001", "Pensil", 10, 2.5)
    db.add_item(item)
    assert db.get_item("A001") == item


def test_get_missing_returns_none(db):
    assert db.get_item("Z999") is None


def test_all_items_ordered_by_id(db):
    db.add_item(InventoryItem("B002", "Buku", 3, 15.0))
    db.add_item(InventoryItem("A001", "Pensil", 10, 2.5))
    db.add_item(InventoryItem("C003", "Penghapus", 7, 1.0))
    assert [item.id for item in db.all_items()] == ["A001", "B002", "C003"]


def test_all_items_empty(db):
    assert db.all_items() == []


def test_duplicate_id_rejected(db):
    db.add_item(InventoryItem("A001", "Pensil", 10, 2.5))
    with pytest.raises(DuplicateItemError):
        db.add_item(InventoryItem("A001", "Lain", 1, 1.0))
    assert db.get_item("A001").name == "Pensil"


def test_duplicate_caught_as_database_error(db):
    db.add_item(InventoryItem("A001", "Pensil", 10, 2.5))
    with pytest.raises(DatabaseError):
        db.add_item(InventoryItem("A001", "Lain", 1, 1.0))


def test_not_connected_caught_as_database_error(tmp_path):
    database = InventoryDatabase(tmp_path / "inventory.db")
    with pytest.raises(DatabaseError):
        database.all_items()


def test_update_existing(db):
    db.add_item(InventoryItem("A001", "Pensil", 10, 2.5))
    changed = InventoryItem("A001", "Pensil 2B", 20, 3.0)
    assert db.update_item(changed) is True
    assert db.get_item("A001") == changed


def test_update_missing_returns_false(db):
    assert db.update_item(InventoryItem("X1", "Tidak ada", 1, 1.0)) is False
    assert db.get_item("X1") is None


def test_delete_existing(db):
    db.add_item(InventoryItem("A001", "Pensil", 10, 2.5))
    assert db.delete_item("A001") is True
    assert db.get_item("A001") is None


def test_delete_missing_returns_false(db):
    assert db.delete_item("A001") is False


def test_price_rounded_to_two_decimals(db):
    db.add_item(InventoryItem("A001", "Pensil", 1, 3.14159))
    assert db.get_item("A001").price == pytest.approx(3.14)


def test_id_too_long_rejected(db):
    with pytest.raises(DatabaseError):
        db.add_item(InventoryItem("x" * 51, "Nama", 1, 1.0))
    assert db.all_items() == []


def test_name_too_long_rejected(db):
    with pytest.raises(DatabaseError):
        db.add_item(InventoryItem("A001", "n" * 101, 1, 1.0))
    assert db.get_item("A001") is None


def test_operations_require_connection(tmp_path):
    database = InventoryDatabase(tmp_path / "inventory.db")
    with pytest.raises(NotConnectedError):
        database.all_items()
    with pytest.raises(NotConnectedError):
        database.get_item("A001")
    with pytest.raises(NotConnectedError):
        database.add_item(InventoryItem("A001", "Pensil", 1, 1.0))
    with pytest.raises(NotConnectedError):
        database.update_item(InventoryItem("A001", "Pensil", 1, 1.0))
    with pytest.raises(NotConnectedError):
        database.delete_item("A001")


def test_disconnect_then_operation_fails(db):
    db.disconnect()
    assert db.is_connected is False
    with pytest.raises(NotConnectedError):
        db.all_items()


def test_disconnect_is_idempotent(db):
    db.disconnect()
    db.disconnect()
    assert db.is_connected is False


def test_context_manager_closes(tmp_path):
    with InventoryDatabase(tmp_path / "inventory.db") as database:
        assert database.is_connected is True
    assert database.is_connected is False


def test_data_persists_across_connections(tmp_path):
    path = tmp_path / "inventory.db"
    item = InventoryItem("A001", "Pensil", 10, 2.5)
    with InventoryDatabase(path) as database:
        database.add_item(item)
    with InventoryDatabase(path) as database:
        assert database.all_items() == [item]


def test_connect_bad_path_raises(tmp_path):
    database = InventoryDatabase(tmp_path / "missing" / "dir" / "inventory.db")
    with pytest.raises(DatabaseError):
        database.connect()
    assert database.is_connected is False


def test_quotes_in_values_stored_literally(db):
    item = InventoryItem("A'1; DROP", "O'Brien \"x\"", 1, 1.0)
    db.add_item(item)
    assert db.get_item("A'1; DROP") == item
    assert len(db.all_items()) == 1