"""Interactive management of an inventory held in a plain list."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from .models import TABLE_HEADER, TABLE_RULE, InventoryItem
from .prompts import read_float, read_int, read_line

MAX_QUANTITY = 99999


def _out(stdout: TextIO | None) -> TextIO:
    return stdout if stdout is not None else sys.stdout


def format_table(items: Iterable[InventoryItem]) -> str:
    """Render items as a fixed-width table framed by rules."""
    lines = [TABLE_HEADER, TABLE_RULE]
    lines.extend(item.table_row() for item in items)
    lines.append(TABLE_RULE)
    return "\n".join(lines)


def matches(item: InventoryItem, keyword: str) -> bool:
    """Whether keyword occurs, ignoring case, in the item's id or name."""
    needle = keyword.lower()
    return needle in item.id.lower() or needle in item.name.lower()


def add_item(
    inventory: list[InventoryItem],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InventoryItem | None:
    """Ask for a new item and append it; returns it, or None for a duplicate id."""
    out = _out(stdout)
    print("\n--- Tambah Item Baru ---", file=out)
    item_id = read_line("Masukkan ID Item (misal: A001): ", stdin, out)
    if any(item.id == item_id for item in inventory):
        print(
            f"Error: ID Item '{item_id}' sudah ada. Gagal menambahkan item.",
            file=out,
        )
        return None
    name = read_line("Masukkan Nama Item: ", stdin, out)
    quantity = read_int("Masukkan Kuantitas: ", 0, MAX_QUANTITY, stdin, out)
    price = read_float("Masukkan Harga per Unit: ", 0.0, stdin, out)
    item = InventoryItem(item_id, name, quantity, price)
    inventory.append(item)
    print("Item berhasil ditambahkan!", file=out)
    return item


def show_items(inventory: list[InventoryItem], stdout: TextIO | None = None) -> None:
    """Print the whole inventory as a table."""
    out = _out(stdout)
    print("\n--- Daftar Inventaris ---", file=out)
    if not inventory:
        print("Inventaris kosong.", file=out)
        return
    print(format_table(inventory), file=out)


def search_items(
    inventory: list[InventoryItem],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> list[InventoryItem]:
    """Ask for a keyword and print every item whose id or name contains it."""
    out = _out(stdout)
    print("\n--- Cari Item ---", file=out)
    if not inventory:
        print("Inventaris kosong. Tidak ada yang bisa dicari.", file=out)
        return []
    keyword = read_line("Masukkan ID atau Nama Item yang ingin dicari: ", stdin, out)
    print("\nHasil Pencarian:", file=out)
    found = [item for item in inventory if matches(item, keyword)]
    for item in found:
        print(item.summary(), file=out)
    if not found:
        print(f"Item dengan '{keyword}' tidak ditemukan.", file=out)
    return found


def update_item(
    inventory: list[InventoryItem],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> InventoryItem | None:
    """Ask for an id and change that item's quantity or price."""
    out = _out(stdout)
    print("\n--- Perbarui Item ---", file=out)
    if not inventory:
        print("Inventaris kosong. Tidak ada item untuk diperbarui.", file=out)
        return None
    item_id = read_line("Masukkan ID Item yang ingin diperbarui: ", stdin, out)
    item = next((entry for entry in inventory if entry.id == item_id), None)
    if item is None:
        print(f"Item dengan ID '{item_id}' tidak ditemukan.", file=out)
        return None
    print(
        f"Item ditemukan: {item.name} (Kuantitas: {item.quantity}, Harga: {item.price:g})",
        file=out,
    )
    print("Pilih apa yang ingin diperbarui:", file=out)
    print("1. Kuantitas", file=out)
    print("2. Harga", file=out)
    choice = read_int("Pilihan (1-2): ", 1, 2, stdin, out)
    if choice == 1:
        item.quantity = read_int("Masukkan Kuantitas Baru: ", 0, MAX_QUANTITY, stdin, out)
        print(f"Kuantitas item '{item.name}' berhasil diperbarui.", file=out)
    else:
        item.price = read_float("Masukkan Harga Baru: ", 0.0, stdin, out)
        print(f"Harga item '{item.name}' berhasil diperbarui.", file=out)
    return item


def remove_item(
    inventory: list[InventoryItem],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Ask for an id and remove every item carrying it; True if any was removed."""
    out = _out(stdout)
    print("\n--- Hapus Item ---", file=out)
    if not inventory:
        print("Inventaris kosong. Tidak ada item untuk dihapus.", file=out)
        return False
    item_id = read_line("Masukkan ID Item yang ingin dihapus: ", stdin, out)
    kept = [item for item in inventory if item.id != item_id]
    if len(kept) == len(inventory):
        print(f"Item dengan ID '{item_id}' tidak ditemukan.", file=out)
        return False
    inventory[:] = kept
    print(f"Item dengan ID '{item_id}' berhasil dihapus.", file=out)
    return True