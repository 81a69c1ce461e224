"""A small book catalogue in SQLite, queried through lazy filters."""

from __future__ import annotations

import argparse
import sqlite3
from collections.abc import Iterator
from contextlib import closing
from dataclasses import dataclass, fields, replace
from typing import Optional

from .sequences import filter_values


@dataclass
class Book:
    name: str = ""
    author: str = ""
    theme: str = ""
    id: Optional[int] = None


_BOOK_FIELDS = frozenset(f.name for f in fields(Book))

_SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name VARCHAR(255) NOT NULL,
    author VARCHAR(255) NOT NULL,
    theme VARCHAR(255)
)
"""

_SAMPLE_BOOKS = (
    Book(name="Story #1", author="Author #1", theme="Story"),
    Book(name="Story #2", author="Author #3", theme="Story"),
    Book(name="Story #5", author="Author #1", theme="Story"),
    Book(name="True Detective", author="Author #6", theme="Detective"),
)


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the books table if it does not exist."""
    connection.execute(_SCHEMA)


def add_book(connection: sqlite3.Connection, book: Book) -> Book:
    """Insert ``book`` and return a copy carrying its database id."""
    if book.id is None:
        cursor = connection.execute(
            "INSERT INTO books (name, author, theme) VALUES (?, ?, ?)",
            (book.name, book.author, book.theme),
        )
    else:
        cursor = connection.execute(
            "INSERT INTO books (id, name, author, theme) VALUES (?, ?, ?, ?)",
            (book.id, book.name, book.author, book.theme),
        )
    return replace(book, id=cursor.lastrowid)


def do_query(connection: sqlite3.Connection, query: str) -> Iterator[Book]:
    """Run ``query`` when iterated and yield its rows as books.

    Columns without a matching field are ignored; missing fields keep defaults.
    """
    cursor = connection.execute(query)
    columns = [description[0] for description in cursor.description]
    rows = cursor.fetchall()
    for row in rows:
        values = {
            column: value
            for column, value in zip(columns, row)
            if column in _BOOK_FIELDS and value is not None
        }
        yield Book(**values)


def main(argv: Optional[list[str]] = None) -> int:
    """Seed a catalogue and print the books whose theme is Story."""
    parser = argparse.ArgumentParser(description="List story books from a catalogue.")
    parser.add_argument("database", nargs="?", default="books.db")
    args = parser.parse_args(argv)

    with closing(sqlite3.connect(args.database)) as connection:
        with connection:
            create_schema(connection)
            for book in _SAMPLE_BOOKS:
                add_book(connection, book)

        stories = filter_values(
            do_query(connection, "SELECT * FROM books"),
            lambda b: b.theme == "Story",
        )
        for book in stories:
            print(book)
    return 0