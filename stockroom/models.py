"""The inventory item record and its text renderings."""

from __future__ import annotations

from dataclasses import dataclass

TABLE_HEADER = f"{'ID':<10}{'Nama':<25}{'Kuantitas':>12}{'Harga/Unit':>15}"
TABLE_RULE = "-" * 62


@dataclass
class InventoryItem:
    """One stock entry: identifier, name, quantity on hand and unit price."""

    id: str
    name: str
    quantity: int = 0
    price: float = 0.0

    def table_row(self) -> str:
        """Render the item as one row of the inventory table."""
        return (
            f"{self.id:<10}{self.name:<25}"
            f"{self.quantity:>12}{self.price:>15.2f}"
        )

    def summary(self) -> str:
        """Render the item as a single descriptive line."""
        return (
            f"ID: {self.id}, Nama: {self.name}, "
            f"Kuantitas: {self.quantity}, Harga: {self.price:.2f}"
        )