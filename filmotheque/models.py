"""In-memory model of a collection of films, books and their actors."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

__all__ = [
    "Actor",
    "ActorList",
    "FilmList",
    "Item",
    "Film",
    "Book",
    "FilmBook",
]

_DIGITS = "0123456789"


@dataclass
class Actor:
    """An actor appearing in one or more films."""

    name: str = ""
    birth_year: int = 0
    sex: str = "\0"

    def __str__(self) -> str:
        return f"  {self.name}, {self.birth_year} {self.sex}\n"


class ActorList:
    """A fixed-capacity list of actors, shared between the films holding them."""

    def __init__(self, capacity: int = 0) -> None:
        self._capacity = capacity
        self._actors: list[Actor] = []

    def add(self, actor: Actor) -> None:
        """Append *actor*; the list must not already be full."""
        if len(self._actors) >= self._capacity:
            raise IndexError(f"actor list is full (capacity {self._capacity})")
        self._actors.append(actor)

    def copy(self) -> ActorList:
        """Return a list sized to the current actors, sharing the same actor objects."""
        duplicate = ActorList(len(self._actors))
        duplicate._actors = list(self._actors)
        return duplicate

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._actors)

    def __getitem__(self, index: int) -> Actor:
        if not 0 <= index < len(self._actors):
            raise IndexError(f"actor index {index} out of range")
        return self._actors[index]

    def __iter__(self) -> Iterator[Actor]:
        return iter(self._actors)


class FilmList:
    """A growable list of films that does not own them."""

    def __init__(self) -> None:
        self._capacity = 0
        self._films: list[Film] = []

    def add_film(self, film: Film) -> None:
        """Append *film*, doubling the capacity when it is full."""
        if len(self._films) == self._capacity:
            self._capacity = max(1, self._capacity * 2)
        self._films.append(film)

    def find_actor(self, name: str) -> Actor | None:
        """Return the first actor named *name* in any film, or None."""
        for film in self._films:
            for actor in film.actors:
                if actor.name == name:
                    return actor
        return None

    def find(self, criterion: Callable[[Film], object]) -> Film | None:
        """Return the first film satisfying *criterion*, or None."""
        for film in self._films:
            if criterion(film):
                return film
        return None

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._films)

    def __getitem__(self, index: int) -> Film:
        if not 0 <= index < len(self._films):
            raise IndexError(f"film index {index} out of range")
        return self._films[index]

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)


def _next_non_space(stream: TextIO) -> str:
    while True:
        ch = stream.read(1)
        if not ch or not ch.isspace():
            return ch


def _read_while(stream: TextIO, accept: Callable[[str], bool]) -> str:
    seekable = stream.seekable()
    chars: list[str] = []
    while True:
        position = stream.tell() if seekable else None
        ch = stream.read(1)
        if not ch:
            break
        if not accept(ch):
            if position is not None:
                stream.seek(position)
            break
        chars.append(ch)
    return "".join(chars)


def _read_quoted(stream: TextIO) -> str:
    first = _next_non_space(stream)
    if not first:
        raise ValueError("unexpected end of input while reading a string")
    if first != '"':
        return first + _read_while(stream, lambda c: not c.isspace())
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            raise ValueError("unterminated quoted string")
        if ch == "\\":
            ch = stream.read(1)
            if not ch:
                raise ValueError("unterminated quoted string")
            chars.append(ch)
        elif ch == '"':
            return "".join(chars)
        else:
            chars.append(ch)


def _read_int(stream: TextIO) -> int:
    first = _next_non_space(stream)
    if not first:
        raise ValueError("unexpected end of input while reading an integer")
    if first in "+-":
        sign, digits = first, _read_while(stream, lambda c: c in _DIGITS)
    elif first in _DIGITS:
        sign, digits = "", first + _read_while(stream, lambda c: c in _DIGITS)
    else:
        raise ValueError(f"expected an integer, found {first!r}")
    if not digits:
        raise ValueError("expected digits after sign")
    return int(sign + digits)


class Item:
    """Something with a title and a release year that can be displayed."""

    def __init__(self, title: str = "", release_year: int = 0) -> None:
        self.title = title
        self.release_year = release_year

    def display(self, out: TextIO) -> None:
        out.write(f"Titre: {self.title}  Année:{self.release_year}\n")

    def read_from(self, stream: TextIO) -> None:
        """Read a quoted title followed by the release year."""
        self.title = _read_quoted(stream)
        self.release_year = _read_int(stream)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.display(buffer)
        return buffer.getvalue()


class Film(Item):
    """A film with its director, box-office revenue and actors."""

    def __init__(
        self,
        title: str = "",
        release_year: int = 0,
        director: str = "",
        revenue: int = 0,
        actors: ActorList | None = None,
    ) -> None:
        Item.__init__(self, title, release_year)
        self.director = director
        self.revenue = revenue
        self.actors = actors if actors is not None else ActorList()

    def display(self, out: TextIO) -> None:
        Item.display(self, out)
        Film.display_specific(self, out)

    def display_specific(self, out: TextIO) -> None:
        """Write the film-specific part, without the title line."""
        out.write(f"  Réalisateur: {self.director}\n")
        out.write(f"  Recette: {self.revenue}M$\n")
        out.write("Acteurs:\n")
        for actor in self.actors:
            out.write(str(actor))


class Book(Item):
    """A book with its author, copies sold (in millions) and page count."""

    def __init__(
        self,
        title: str = "",
        release_year: int = 0,
        author: str = "",
        copies_sold: int = 0,
        pages: int = 0,
    ) -> None:
        Item.__init__(self, title, release_year)
        self.author = author
        self.copies_sold = copies_sold
        self.pages = pages

    @classmethod
    def from_stream(cls, stream: TextIO) -> Book:
        book = cls()
        book.read_from(stream)
        return book

    def display(self, out: TextIO) -> None:
        Item.display(self, out)
        Book.display_specific(self, out)

    def display_specific(self, out: TextIO) -> None:
        """Write the book-specific part, without the title line."""
        out.write(f"  Auteur: {self.author}\n")
        out.write(f"  Vendus: {self.copies_sold}M  Pages: {self.pages}\n")

    def read_from(self, stream: TextIO) -> None:
        """Read title, year, quoted author, copies sold and page count."""
        Item.read_from(self, stream)
        self.author = _read_quoted(stream)
        self.copies_sold = _read_int(stream)
        self.pages = _read_int(stream)


class FilmBook(Film, Book):
    """A film and the book it comes from, shown as one item."""

    def __init__(self, film: Film, book: Book) -> None:
        Item.__init__(self, film.title, film.release_year)
        self.director = film.director
        self.revenue = film.revenue
        self.actors = film.actors.copy()
        self.author = book.author
        self.copies_sold = book.copies_sold
        self.pages = book.pages

    def display(self, out: TextIO) -> None:
        Item.display(self, out)
        out.write("Combo:\n")
        Film.display_specific(self, out)
        out.write("Livre:\n")
        Book.display_specific(self, out)


def _films_from(films: Iterable[Film]) -> FilmList:
    result = FilmList()
    for film in films:
        result.add_film(film)
    return result