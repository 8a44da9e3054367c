"""Loading films from the binary film file and books from the text book file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from filmotheque.binary_reader import read_string, read_uint_variable
from filmotheque.models import Actor, ActorList, Book, Film, FilmList

__all__ = ["read_actor", "read_film", "create_film_list", "read_books"]


def _log_target(log: TextIO | None) -> TextIO:
    return sys.stdout if log is None else log


def read_actor(stream: BinaryIO, films: FilmList, log: TextIO | None = None) -> Actor:
    """Read one actor, reusing the actor of the same name already in *films*."""
    name = read_string(stream)
    birth_year = read_uint_variable(stream)
    sex = chr(read_uint_variable(stream) % 256)

    existing = films.find_actor(name)
    if existing is not None:
        return existing
    _log_target(log).write(f"Création Acteur {name}\n")
    return Actor(name=name, birth_year=birth_year, sex=sex)


def read_film(stream: BinaryIO, films: FilmList, log: TextIO | None = None) -> Film:
    """Read one film and its actors; actors are looked up in *films* first."""
    title = read_string(stream)
    director = read_string(stream)
    release_year = read_uint_variable(stream)
    revenue = read_uint_variable(stream)
    actor_count = read_uint_variable(stream)
    film = Film(
        title=title,
        release_year=release_year,
        director=director,
        revenue=revenue,
        actors=ActorList(actor_count),
    )
    _log_target(log).write(f"Création Film {film.title}\n")
    for _ in range(actor_count):
        film.actors.add(read_actor(stream, films, log))
    return film


def create_film_list(path: str | Path, log: TextIO | None = None) -> FilmList:
    """Read every film of the binary file at *path*."""
    films = FilmList()
    with open(path, "rb") as stream:
        count = read_uint_variable(stream)
        for _ in range(count):
            films.add_film(read_film(stream, films, log))
    return films


def _at_end(stream: TextIO) -> bool:
    """Skip whitespace; tell whether the stream is exhausted."""
    while True:
        position = stream.tell()
        ch = stream.read(1)
        if not ch:
            return True
        if not ch.isspace():
            stream.seek(position)
            return False


def read_books(path: str | Path) -> list[Book]:
    """Read every book of the text file at *path*."""
    books: list[Book] = []
    with open(path, encoding="utf-8") as stream:
        while not _at_end(stream):
            books.append(Book.from_stream(stream))
    return books