"""Menu-driven terminal front end for an inventory kept in a database."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import TextIO

from .database import DatabaseError, InventoryDatabase
from .memory import MAX_QUANTITY, format_table
from .models import InventoryItem
from .prompts import InputExhausted, read_float, read_int, read_line

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "inventaris.db"

MENU = (
    "\n=== Manajemen Inventaris ===",
    "1. Tambah Item",
    "2. Tampilkan Semua Item",
    "3. Cari Item",
    "4. Perbarui Item",
    "5. Hapus Item",
    "0. Keluar",
)


def _out(stdout: TextIO | None) -> TextIO:
    return stdout if stdout is not None else sys.stdout


def _lookup(db: InventoryDatabase, item_id: str) -> InventoryItem | None:
    """Fetch an item, treating a database failure as "not found"."""
    try:
        return db.get_item(item_id)
    except DatabaseError as exc:
        logger.error("lookup of %r failed: %s", item_id, exc)
        return None


def add_item(
    db: InventoryDatabase,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InventoryItem | None:
    """Ask for a new item and store it; returns it, or None if nothing was stored."""
    out = _out(stdout)
    print("\n--- Tambah Item Baru ---", file=out)
    item_id = read_line("Masukkan ID Item (misal: A001): ", stdin, out)
    if _lookup(db, item_id) is not None:
        print(
            f"Error: ID Item '{item_id}' sudah ada. Gagal menambahkan item.",
            file=out,
        )
        return None
    name = read_line("Masukkan Nama Item: ", stdin, out)
    quantity = read_int("Masukkan Kuantitas: ", 0, MAX_QUANTITY, stdin, out)
    price = read_float("Masukkan Harga per Unit: ", 0.0, stdin, out)
    item = InventoryItem(item_id, name, quantity, price)
    try:
        db.add_item(item)
    except DatabaseError as exc:
        logger.error("adding %r failed: %s", item_id, exc)
        print("Gagal menambahkan item ke database.", file=out)
        return None
    print("Item berhasil ditambahkan!", file=out)
    return item


def show_items(db: InventoryDatabase, stdout: TextIO | None = None) -> list[InventoryItem]:
    """Print every stored item as a table and return them."""
    out = _out(stdout)
    print("\n--- Daftar Inventaris ---", file=out)
    try:
        items = db.all_items()
    except DatabaseError as exc:
        logger.error("reading items failed: %s", exc)
        items = []
    if not items:
        print("Inventaris kosong.", file=out)
        return []
    print(format_table(items), file=out)
    return items


def find_item(
    db: InventoryDatabase,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InventoryItem | None:
    """Ask for an id and print the matching item, if any."""
    out = _out(stdout)
    print("\n--- Cari Item ---", file=out)
    keyword = read_line("Masukkan ID Item yang ingin dicari: ", stdin, out)
    item = _lookup(db, keyword)
    if item is None:
        print(f"Item dengan ID '{keyword}' tidak ditemukan.", file=out)
        return None
    print(f"Ditemukan! {item.summary()}", file=out)
    return item


def update_item(
    db: InventoryDatabase,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InventoryItem | None:
    """Ask for an id and change that item's quantity, price or name."""
    out = _out(stdout)
    print("\n--- Perbarui Item ---", file=out)
    item_id = read_line("Masukkan ID Item yang ingin diperbarui: ", stdin, out)
    existing = _lookup(db, item_id)
    if existing is None:
        print(f"Item dengan ID '{item_id}' tidak ditemukan.", file=out)
        return None
    print(
        f"Item ditemukan: {existing.name} "
        f"(Kuantitas: {existing.quantity}, Harga: {existing.price:g})",
        file=out,
    )
    print("Pilih apa yang ingin diperbarui:", file=out)
    print("1. Kuantitas", file=out)
    print("2. Harga", file=out)
    print("3. Nama", file=out)
    choice = read_int("Pilihan (1-3): ", 1, 3, stdin, out)
    if choice == 1:
        quantity = read_int("Masukkan Kuantitas Baru: ", 0, MAX_QUANTITY, stdin, out)
        updated = dataclasses.replace(existing, quantity=quantity)
    elif choice == 2:
        price = read_float("Masukkan Harga Baru: ", 0.0, stdin, out)
        updated = dataclasses.replace(existing, price=price)
    else:
        name = read_line("Masukkan Nama Baru: ", stdin, out)
        updated = dataclasses.replace(existing, name=name)
    try:
        stored = db.update_item(updated)
    except DatabaseError as exc:
        logger.error("updating %r failed: %s", item_id, exc)
        stored = False
    if not stored:
        print("Gagal memperbarui item di database.", file=out)
        return None
    print("Item berhasil diperbarui.", file=out)
    return updated


def delete_item(
    db: InventoryDatabase,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Ask for an id and delete that item; True if it was removed."""
    out = _out(stdout)
    print("\n--- Hapus Item ---", file=out)
    item_id = read_line("Masukkan ID Item yang ingin dihapus: ", stdin, out)
    try:
        removed = db.delete_item(item_id)
    except DatabaseError as exc:
        logger.error("deleting %r failed: %s", item_id, exc)
        removed = False
    if removed:
        print("Item berhasil dihapus.", file=out)
    else:
        print("Gagal menghapus item dari database atau item tidak ditemukan.", file=out)
    return removed


def run(
    db: InventoryDatabase,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Show the main menu repeatedly until the user chooses to quit."""
    out = _out(stdout)
    actions = {
        1: lambda: add_item(db, stdin, out),
        2: lambda: show_items(db, out),
        3: lambda: find_item(db, stdin, out),
        4: lambda: update_item(db, stdin, out),
        5: lambda: delete_item(db, stdin, out),
    }
    while True:
        for line in MENU:
            print(line, file=out)
        choice = read_int("Pilih opsi (0-5): ", 0, 5, stdin, out)
        if choice == 0:
            print(
                "Terima kasih telah menggunakan aplikasi manajemen inventaris.",
                file=out,
            )
            return
        actions[choice]()


def main(argv: list[str] | None = None) -> int:
    """Open the inventory database and run the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="stockroom", description="Manage an inventory from the terminal."
    )
    parser.add_argument(
        "--database",
        default=DEFAULT_DATABASE,
        help=f"path of the SQLite database file (default: {DEFAULT_DATABASE})",
    )
    args = parser.parse_args(argv)

    db = InventoryDatabase(args.database)
    try:
        db.connect()
    except DatabaseError as exc:
        logger.error("%s", exc)
        print("Gagal terkoneksi ke database. Aplikasi akan keluar.", file=sys.stderr)
        return 1
    try:
        run(db)
    except (InputExhausted, KeyboardInterrupt):
        print(file=sys.stdout)
    finally:
        db.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())