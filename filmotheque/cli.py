"""Command that loads the film and book collections and displays them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from filmotheque.binary_reader import FormatError
from filmotheque.loader import create_film_list, read_books
from filmotheque.models import Book, Film, FilmBook, Item

__all__ = ["display_items", "build_items", "main"]

_ITEM_SEPARATOR = "\033[32m" + "─" * 40 + "\033[0m\n"
_FILM_INDEX = 4
_BOOK_INDEX = 9


def display_items(items: Iterable[Item], out: TextIO | None = None) -> None:
    """Write every item, each followed by a separator line."""
    target = sys.stdout if out is None else out
    target.write(_ITEM_SEPARATOR)
    for item in items:
        target.write(str(item))
        target.write(_ITEM_SEPARATOR)


def build_items(
    films_path: str | Path = "films.bin",
    books_path: str | Path = "livres.txt",
    log: TextIO | None = None,
) -> list[Item]:
    """Load films then books, and add the combination of the fifth film and tenth item."""
    items: list[Item] = list(create_film_list(films_path, log))
    items.extend(read_books(books_path))

    film = items[_FILM_INDEX]
    book = items[_BOOK_INDEX]
    if not isinstance(film, Film):
        raise TypeError(f"item {_FILM_INDEX} is not a film")
    if not isinstance(book, Book):
        raise TypeError(f"item {_BOOK_INDEX} is not a book")
    items.append(FilmBook(film, book))
    return items


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="filmotheque", description="Display a collection of films and books."
    )
    parser.add_argument("films", nargs="?", default="films.bin", help="binary film file")
    parser.add_argument("books", nargs="?", default="livres.txt", help="text book file")
    args = parser.parse_args(argv)

    try:
        items = build_items(args.films, args.books, sys.stdout)
    except (OSError, FormatError, ValueError, IndexError, TypeError) as error:
        print(f"filmotheque: {error}", file=sys.stderr)
        return 1
    display_items(items, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())