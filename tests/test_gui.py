import pytest

from stockroom.database import InventoryDatabase
from stockroom.gui import (
    FormData,
    InventoryController,
    Notice,
    Severity,
    parse_float,
    parse_int,
)
from stockroom.models import InventoryItem


@pytest.fixture
def db(tmp_path):
    database = InventoryDatabase(tmp_path / "inventaris.db")
    database.connect()
    yield database
    database.disconnect()


@pytest.fixture
def controller(db):
    return InventoryController(db)


def _form(item_id="A001", name="Pensil", quantity="10", price="2.5"):
    return FormData.from_fields(item_id, name, quantity, price)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), (" 7 ", 7), ("-3", -3), ("+8", 8), ("abc", 0), ("", 0), ("12abc", 0), ("1.5", 0)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_out_of_range_is_zero():
    assert parse_int("3000000000") == 0


@pytest.mark.parametrize(
    "text, expected",
    [("2.5", 2.5), (" 4 ", 4.0), ("-1", -1.0), (".5", 0.5), ("abc", 0.0), ("", 0.0), ("1,5", 0.0)],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_form_from_fields_parses_numbers():
    form = FormData.from_fields("A1", "Pen", "3", "1.5")
    assert form.to_item() == InventoryItem("A1", "Pen", 3, 1.5)


def test_form_from_fields_invalid_numbers_become_zero():
    form = FormData.from_fields("A1", "Pen", "many", "cheap")
    assert (form.quantity, form.price) == (0, 0.0)


def test_form_from_item_texts():
    form = FormData.from_item(InventoryItem("A1", "Pen", 3, 1.5))
    assert form.texts() == ("A1", "Pen", "3", "1.50")


def test_form_texts_round_trip():
    item = InventoryItem("B2", "Buku", 7, 12.25)
    item_id, name, quantity, price = FormData.from_item(item).texts()
    assert FormData.from_fields(item_id, name, quantity, price).to_item() == item


def test_add_success(controller, db):
    notice = controller.add(_form())
    assert notice == Notice(Severity.INFO, "Berhasil", "Item berhasil ditambahkan!", succeeded=True)
    assert db.get_item("A001") == InventoryItem("A001", "Pensil", 10, 2.5)


def test_add_duplicate_is_critical(controller, db):
    controller.add(_form())
    notice = controller.add(_form(name="Lain"))
    assert notice.severity is Severity.CRITICAL
    assert notice.title == "Gagal"
    assert not notice.succeeded
    assert db.get_item("A001").name == "Pensil"


@pytest.mark.parametrize(
    "fields",
    [
        {"item_id": ""},
        {"name": ""},
        {"quantity": "-1"},
        {"price": "-0.5"},
    ],
)
def test_add_invalid_input_is_warning(controller, db, fields):
    notice = controller.add(_form(**fields))
    assert notice.severity is Severity.WARNING
    assert notice.title == "Input Tidak Valid"
    assert notice.message == "ID, Nama tidak boleh kosong, dan Kuantitas/Harga harus positif."
    assert db.all_items() == []


def test_update_requires_id(controller):
    notice = controller.update(_form(item_id=""))
    assert notice.severity is Severity.WARNING
    assert notice.message == "Masukkan ID item yang ingin diperbarui di field ID."


def test_update_invalid_input(controller, db):
    controller.add(_form())
    notice = controller.update(_form(name=""))
    assert notice.title == "Input Tidak Valid"
    assert notice.message == "Nama tidak boleh kosong, Kuantitas/Harga harus positif."
    assert db.get_item("A001").name == "Pensil"


def test_update_missing_item_is_critical(controller):
    notice = controller.update(_form(item_id="Z9"))
    assert notice.severity is Severity.CRITICAL
    assert not notice.succeeded


def test_update_success(controller, db):
    controller.add(_form())
    notice = controller.update(_form(name="Pulpen", quantity="4", price="3"))
    assert notice.succeeded
    assert notice.message == "Item berhasil diperbarui!"
    assert db.get_item("A001") == InventoryItem("A001", "Pulpen", 4, 3.0)


def test_delete_requires_id(controller):
    notice = controller.delete("")
    assert notice.severity is Severity.WARNING
    assert notice.message == "Masukkan ID item yang ingin dihapus di field ID."


def test_delete_missing_is_critical(controller):
    notice = controller.delete("Z9")
    assert notice.severity is Severity.CRITICAL
    assert not notice.succeeded


def test_delete_success(controller, db):
    controller.add(_form())
    notice = controller.delete("A001")
    assert notice == Notice(Severity.INFO, "Berhasil", "Item berhasil dihapus!", succeeded=True)
    assert db.get_item("A001") is None


def test_search_requires_id(controller):
    notice = controller.search("")
    assert notice.severity is Severity.WARNING
    assert notice.message == "Masukkan ID item yang ingin dicari di field pencarian."


def test_search_found(controller):
    controller.add(_form())
    notice = controller.search("A001")
    assert notice.title == "Ditemukan"
    assert notice.message == "Item ditemukan: Pensil"
    assert notice.item == InventoryItem("A001", "Pensil", 10, 2.5)


def test_search_not_found(controller):
    notice = controller.search("Z9")
    assert notice.severity is Severity.INFO
    assert notice.title == "Tidak Ditemukan"
    assert notice.message == "Item dengan ID 'Z9' tidak ditemukan."
    assert notice.item is None


def test_rows_format_and_order(controller):
    controller.add(_form(item_id="B2", name="Buku", quantity="3", price="1.5"))
    controller.add(_form(item_id="A1", name="Pen", quantity="3", price="1.5"))
    rows = controller.rows()
    assert [row[0] for row in rows] == sorted(row[0] for row in rows)
    assert rows[0] == ("A1", "Pen", "3", "1.50")


def test_rows_empty(controller):
    assert controller.rows() == []


def test_unconnected_database(tmp_path):
    unconnected = InventoryController(InventoryDatabase(tmp_path / "never.db"))
    assert unconnected.rows() == []
    assert unconnected.add(_form()).severity is Severity.CRITICAL
    assert unconnected.search("A001").title == "Tidak Ditemukan"
    assert unconnected.delete("A001").severity is Severity.CRITICAL