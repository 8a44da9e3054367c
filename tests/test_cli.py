import io

import pytest

from filmotheque.cli import build_items, display_items, main
from filmotheque.models import Book, Film, FilmBook

SEPARATOR = "\033[32m" + "─" * 40 + "\033[0m\n"


def _uint(value):
    if value < 0x100:
        return bytes([0xA0]) + value.to_bytes(1, "little")
    if value < 0x10000:
        return bytes([0xA1]) + value.to_bytes(2, "little")
    return bytes([0xA2]) + value.to_bytes(4, "little")


def _string(text):
    data = text.encode("utf-8")
    return _uint(len(data)) + data


def _write_films(path, count):
    data = _uint(count)
    for n in range(count):
        data += _string(f"Film{n}") + _string(f"Director{n}")
        data += _uint(2000 + n) + _uint(n) + _uint(1)
        data += _string(f"Actor{n}") + _uint(1950 + n) + _uint(ord("M"))
    path.write_bytes(data)


def _write_books(path, count):
    lines = [f'"Book {n}" {1980 + n} "Author {n}" {n} {100 + n}' for n in range(count)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def collection(tmp_path):
    films = tmp_path / "films.bin"
    books = tmp_path / "livres.txt"
    _write_films(films, 5)
    _write_books(books, 5)
    return films, books


def test_display_items_separates_every_item():
    book = Book("Title", 1999, "Writer", 3, 120)
    film = Film(title="Movie", release_year=2000)
    out = io.StringIO()
    display_items([book, film], out)
    text = out.getvalue()
    assert text == SEPARATOR + str(book) + SEPARATOR + str(film) + SEPARATOR


def test_display_items_empty_writes_single_separator():
    out = io.StringIO()
    display_items([], out)
    assert out.getvalue() == SEPARATOR


def test_build_items_appends_combination(collection):
    films, books = collection
    items = build_items(films, books, io.StringIO())
    assert len(items) == 11
    assert all(isinstance(item, Film) for item in items[:5])
    assert all(isinstance(item, Book) for item in items[5:10])
    combo = items[-1]
    assert isinstance(combo, FilmBook)
    assert combo.title == items[4].title
    assert combo.director == items[4].director
    assert combo.author == items[9].author
    assert combo.pages == items[9].pages
    assert [a.name for a in combo.actors] == [a.name for a in items[4].actors]


def test_build_items_too_few_items_raises(tmp_path):
    films = tmp_path / "films.bin"
    books = tmp_path / "livres.txt"
    _write_films(films, 5)
    _write_books(books, 2)
    with pytest.raises(IndexError):
        build_items(films, books, io.StringIO())


def test_build_items_wrong_kind_raises(tmp_path):
    films = tmp_path / "films.bin"
    books = tmp_path / "livres.txt"
    _write_films(films, 10)
    _write_books(books, 1)
    with pytest.raises(TypeError):
        build_items(films, books, io.StringIO())


def test_main_displays_collection(collection, capsys):
    films, books = collection
    assert main([str(films), str(books)]) == 0
    output = capsys.readouterr().out
    assert "Création Film Film0" in output
    assert "Combo:\n" in output
    assert output.count(SEPARATOR) == 12


def test_main_missing_file_fails(tmp_path, capsys):
    result = main([str(tmp_path / "none.bin"), str(tmp_path / "none.txt")])
    assert result == 1
    assert "filmotheque:" in capsys.readouterr().err