"""Windowed front end for an inventory kept in a database."""

from __future__ import annotations

import argparse
import enum
import logging
import re
import sys
from dataclasses import dataclass
from typing import Any

from .database import DatabaseError, InventoryDatabase
from .models import InventoryItem

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "inventaris.db"
WINDOW_TITLE = "Manajemen Inventaris"
COLUMNS = ("ID", "Nama", "Kuantitas", "Harga")

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def parse_int(text: str) -> int:
    """Read a whole decimal integer from a text field; 0 when it is not one."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def parse_float(text: str) -> float:
    """Read a decimal number from a text field; 0.0 when it is not one."""
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    return float(stripped)


@dataclass(frozen=True)
class FormData:
    """The values of the item input fields."""

    item_id: str
    name: str
    quantity: int
    price: float

    @classmethod
    def from_fields(cls, item_id: str, name: str, quantity: str, price: str) -> FormData:
        """Build form data from the raw texts of the input fields."""
        return cls(item_id, name, parse_int(quantity), parse_float(price))

    @classmethod
    def from_item(cls, item: InventoryItem) -> FormData:
        """Build form data showing a stored item."""
        return cls(item.id, item.name, item.quantity, item.price)

    def to_item(self) -> InventoryItem:
        """The inventory item these values describe."""
        return InventoryItem(self.item_id, self.name, self.quantity, self.price)

    def texts(self) -> tuple[str, str, str, str]:
        """The texts to put in the id, name, quantity and price fields."""
        return self.item_id, self.name, str(self.quantity), f"{self.price:.2f}"


class Severity(enum.Enum):
    """How a message to the user is presented."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Notice:
    """The outcome of a user action, as a message to show."""

    severity: Severity
    title: str
    message: str
    succeeded: bool = False
    item: InventoryItem | None = None


def _warning(message: str, title: str = "Peringatan") -> Notice:
    return Notice(Severity.WARNING, title, message)


class InventoryController:
    """The actions behind the window's buttons, independent of any toolkit."""

    def __init__(self, db: InventoryDatabase) -> None:
        self.db = db

    def rows(self) -> list[tuple[str, str, str, str]]:
        """Table rows for every stored item, ordered by id."""
        try:
            items = self.db.all_items()
        except DatabaseError as exc:
            logger.error("reading items failed: %s", exc)
            return []
        if not items:
            logger.debug("no items in the database")
        return [FormData.from_item(item).texts() for item in items]

    def add(self, form: FormData) -> Notice:
        """Store a new item from the form."""
        if not form.item_id or not form.name or form.quantity < 0 or form.price < 0:
            return _warning(
                "ID, Nama tidak boleh kosong, dan Kuantitas/Harga harus positif.",
                "Input Tidak Valid",
            )
        try:
            self.db.add_item(form.to_item())
        except DatabaseError as exc:
            logger.error("adding %r failed: %s", form.item_id, exc)
            return Notice(
                Severity.CRITICAL,
                "Gagal",
                "Gagal menambahkan item. Mungkin ID sudah ada atau terjadi kesalahan database.",
            )
        return Notice(Severity.INFO, "Berhasil", "Item berhasil ditambahkan!", succeeded=True)

    def update(self, form: FormData) -> Notice:
        """Overwrite the stored item carrying the form's id."""
        if not form.item_id:
            return _warning("Masukkan ID item yang ingin diperbarui di field ID.")
        if not form.name or form.quantity < 0 or form.price < 0:
            return _warning(
                "Nama tidak boleh kosong, Kuantitas/Harga harus positif.",
                "Input Tidak Valid",
            )
        try:
            stored = self.db.update_item(form.to_item())
        except DatabaseError as exc:
            logger.error("updating %r failed: %s", form.item_id, exc)
            stored = False
        if not stored:
            return Notice(
                Severity.CRITICAL,
                "Gagal",
                "Gagal memperbarui item. Mungkin ID tidak ditemukan atau terjadi kesalahan database.",
            )
        return Notice(Severity.INFO, "Berhasil", "Item berhasil diperbarui!", succeeded=True)

    def delete(self, item_id: str) -> Notice:
        """Remove the stored item with this id."""
        if not item_id:
            return _warning("Masukkan ID item yang ingin dihapus di field ID.")
        try:
            removed = self.db.delete_item(item_id)
        except DatabaseError as exc:
            logger.error("deleting %r failed: %s", item_id, exc)
            removed = False
        if not removed:
            return Notice(
                Severity.CRITICAL,
                "Gagal",
                "Gagal menghapus item. Mungkin ID tidak ditemukan atau terjadi kesalahan database.",
            )
        return Notice(Severity.INFO, "Berhasil", "Item berhasil dihapus!", succeeded=True)

    def search(self, item_id: str) -> Notice:
        """Look up the item with this id."""
        if not item_id:
            return _warning("Masukkan ID item yang ingin dicari di field pencarian.")
        try:
            item = self.db.get_item(item_id)
        except DatabaseError as exc:
            logger.error("lookup of %r failed: %s", item_id, exc)
            item = None
        if item is None:
            return Notice(
                Severity.INFO,
                "Tidak Ditemukan",
                f"Item dengan ID '{item_id}' tidak ditemukan.",
            )
        return Notice(
            Severity.INFO,
            "Ditemukan",
            f"Item ditemukan: {item.name}",
            succeeded=True,
            item=item,
        )


class MainWindow:
    """The inventory window: input fields, action buttons and an item table."""

    def __init__(self, root: Any, controller: InventoryController) -> None:
        import tkinter as tk
        from tkinter import messagebox, ttk

        self._messagebox = messagebox
        self.root = root
        self.controller = controller
        root.title(WINDOW_TITLE)

        self.id_var = tk.StringVar(root)
        self.name_var = tk.StringVar(root)
        self.quantity_var = tk.StringVar(root)
        self.price_var = tk.StringVar(root)
        self.search_var = tk.StringVar(root)

        form = ttk.Frame(root, padding=8)
        form.grid(row=0, column=0, sticky="ew")
        form.columnconfigure(1, weight=1)
        fields = (
            ("ID", self.id_var),
            ("Nama", self.name_var),
            ("Kuantitas", self.quantity_var),
            ("Harga", self.price_var),
            ("Cari ID", self.search_var),
        )
        self._entries = []
        for row, (label, var) in enumerate(fields):
            ttk.Label(form, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8))
            entry = ttk.Entry(form, textvariable=var)
            entry.grid(row=row, column=1, sticky="ew", pady=2)
            self._entries.append(entry)
        self._id_entry = self._entries[0]

        buttons = ttk.Frame(root, padding=(8, 0))
        buttons.grid(row=1, column=0, sticky="ew")
        actions = (
            ("Tambah", self._on_add),
            ("Perbarui", self._on_update),
            ("Hapus", self._on_delete),
            ("Cari", self._on_search),
            ("Bersihkan", self._on_clear),
        )
        for column, (label, command) in enumerate(actions):
            ttk.Button(buttons, text=label, command=command).grid(
                row=0, column=column, padx=2, pady=4
            )

        self.table = ttk.Treeview(root, columns=COLUMNS, show="headings", selectmode="browse")
        for column in COLUMNS:
            self.table.heading(column, text=column)
        self.table.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)
        self.table.bind("<ButtonRelease-1>", self._on_row_clicked)

        root.columnconfigure(0, weight=1)
        root.rowconfigure(2, weight=1)
        self.reload()

    def reload(self) -> None:
        """Refill the table from the database."""
        self.table.delete(*self.table.get_children())
        rows = self.controller.rows()
        for row in rows:
            self.table.insert("", "end", values=row)
        logger.debug("inventory table reloaded with %d items", len(rows))

    def clear_fields(self) -> None:
        """Empty every input field and focus the id field."""
        for var in (self.id_var, self.name_var, self.quantity_var, self.price_var, self.search_var):
            var.set("")
        self._id_entry.focus_set()

    def _populate(self, item: InventoryItem) -> None:
        item_id, name, quantity, price = FormData.from_item(item).texts()
        self.id_var.set(item_id)
        self.name_var.set(name)
        self.quantity_var.set(quantity)
        self.price_var.set(price)

    def _form(self) -> FormData:
        return FormData.from_fields(
            self.id_var.get(),
            self.name_var.get(),
            self.quantity_var.get(),
            self.price_var.get(),
        )

    def _show(self, notice: Notice) -> None:
        show = {
            Severity.INFO: self._messagebox.showinfo,
            Severity.WARNING: self._messagebox.showwarning,
            Severity.CRITICAL: self._messagebox.showerror,
        }[notice.severity]
        show(notice.title, notice.message, parent=self.root)

    def _finish(self, notice: Notice) -> None:
        self._show(notice)
        if notice.succeeded:
            self.reload()
            self.clear_fields()

    def _on_add(self) -> None:
        self._finish(self.controller.add(self._form()))

    def _on_update(self) -> None:
        self._finish(self.controller.update(self._form()))

    def _on_delete(self) -> None:
        item_id = self.id_var.get()
        if item_id and not self._messagebox.askyesno(
            "Konfirmasi Hapus",
            f"Anda yakin ingin menghapus item dengan ID '{item_id}'?",
            parent=self.root,
        ):
            return
        self._finish(self.controller.delete(item_id))

    def _on_search(self) -> None:
        notice = self.controller.search(self.search_var.get())
        self._show(notice)
        if notice.item is not None:
            self._populate(notice.item)
        elif notice.severity is not Severity.WARNING:
            self.clear_fields()

    def _on_clear(self) -> None:
        self.clear_fields()
        self._messagebox.showinfo(
            "Bersih", "Semua field input telah dibersihkan.", parent=self.root
        )

    def _on_row_clicked(self, event: Any) -> None:
        row = self.table.identify_row(event.y)
        if not row:
            return
        values = self.table.item(row, "values")
        if values:
            self.id_var.set(str(values[0]))
            self._on_search()


def main(argv: list[str] | None = None) -> int:
    """Open the inventory database and run the window until it is closed."""
    import tkinter as tk
    from tkinter import messagebox

    parser = argparse.ArgumentParser(
        prog="stockroom-gui", description="Manage an inventory in a window."
    )
    parser.add_argument(
        "--database",
        default=DEFAULT_DATABASE,
        help=f"path of the SQLite database file (default: {DEFAULT_DATABASE})",
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    db = InventoryDatabase(args.database)
    try:
        db.connect()
    except DatabaseError as exc:
        logger.error("%s", exc)
        root.withdraw()
        messagebox.showerror(
            "Kesalahan Koneksi Database",
            "Gagal terkoneksi ke database. Pastikan database dapat dibuka.\n"
            "Aplikasi akan keluar.",
            parent=root,
        )
        root.destroy()
        return 1
    try:
        MainWindow(root, InventoryController(db))
        root.mainloop()
    finally:
        db.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())