# stockroom

A small inventory manager. Each item has an ID, a name, a quantity and a
price per unit. Items are kept in a local SQLite database file, so they are
still there the next time you start the program.

There are two front ends over the same data:

- an interactive menu in the terminal (`stockroom`), and
- a desktop window with a table of all items and a form for editing them
  (`stockroom-gui`).

The program's messages and prompts are in Indonesian.

## Installing

```
pip install .
```

No third-party packages are needed. The desktop window uses Tk, which ships
with most Python installations.

## The terminal menu

```
stockroom
stockroom --database path/to/file.db
```

`--database` names the SQLite file to use; it defaults to `inventaris.db` in
the current directory and is created if it does not exist. If the database
cannot be opened, the program prints an error and exits with status 1.

The menu offers numbered options:

1. add an item
2. list all items
3. look an item up by its exact ID
4. change an item's quantity, price or name
5. delete an item
0. quit

Numbers you type are checked: a quantity must be between 0 and 99999 and a
price may not be negative. If the input is not a number, or is out of
range, you are asked again. Adding an item whose ID is already stored is
refused. The item list is printed as a table ordered by ID, with prices
shown to two decimal places. Ending the input (Ctrl-D) or pressing Ctrl-C
closes the program.

## The desktop window

```
stockroom-gui
stockroom-gui --database path/to/file.db
```

`--database` works as for the terminal menu.

The window shows every item in a table. Fill in the ID, name, quantity and
price fields and use the buttons to add, update or delete an item. ID and
name may not be empty, and quantity and price may not be negative; text that
is not a number counts as 0. Deleting asks for confirmation first.

The search button looks up the ID typed in the search field and, if the item
is found, fills the form with it; if not, the fields are cleared. Clicking a
row in the table copies that row's ID into the ID field and then runs the
same search.

## Using it from Python

The storage layer can be used on its own:

```python
from stockroom.database import InventoryDatabase
from stockroom.models import InventoryItem

with InventoryDatabase("inventory.db") as db:
    db.add_item(InventoryItem("A001", "Pencil", 120, 2500.0))
    for item in db.all_items():
        print(item.summary())
```

`InventoryDatabase` also has `connect`, `disconnect`, `get_item` (returns
`None` when the ID is unknown), `update_item` and `delete_item` (both return
`False` when no item has the ID). Prices are stored rounded to two decimal
places. IDs are limited to 50 characters, names to 100, and prices must lie
strictly between -100000000 and 100000000.

Adding an ID that already exists raises `DuplicateItemError`, and using the
database before connecting raises `NotConnectedError`; both derive from
`DatabaseError`, which is also raised for other failures.

Other modules:

- `stockroom.models`: the `InventoryItem` dataclass, with `table_row()` and
  `summary()` for text output.
- `stockroom.prompts`: `read_line`, `read_int` and `read_float`, which prompt
  on a stream until valid input is given and raise `InputExhausted` when the
  input ends.
- `stockroom.memory`: the same interactive add, list, search, update and
  remove actions working on a plain Python list instead of a database; its
  search matches a keyword against IDs and names, ignoring case.
- `stockroom.gui`: `InventoryController`, the window's actions without any
  toolkit, returning `Notice` values that describe what to show.

## What it does not do

Storage is a single local SQLite file. There is no database server, no
network access and no support for several users working on the same data at
once.

## Running the tests

```
pip install ".[test]"
pytest
```