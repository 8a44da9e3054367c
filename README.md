# filmotheque

A small catalogue of films and books. Films come from a compact binary file,
each with its director, box-office takings and cast. Books come from a plain
text file. The catalogue can also pair a film with the book it was adapted
from. It prints the whole collection.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
filmotheque [FILMS] [BOOKS]
```

`FILMS` is the binary film file and defaults to `films.bin`. `BOOKS` is the
text book file and defaults to `livres.txt`.

The command works in three steps:

1. It logs each film and each new actor as they are created, for example
   `Création Film ...` and `Création Acteur ...`.
2. It appends one combined item. This item pairs the fifth item, which must be
   a film, with the tenth item, which must be a book. Films come first in the
   list, followed by books.
3. It prints every item between green separator lines.

If a file cannot be read, the command writes `filmotheque: <error>` to standard
error and exits with status 1. It does the same if a file is malformed, or if
the fifth and tenth items are missing or of the wrong kind.

## Input formats

### Films (binary)

Every integer is stored as one header byte followed by its value in
little-endian order:

| header | value that follows |
|--------|--------------------|
| `0xA0` | 1 byte             |
| `0xA1` | 2 bytes            |
| `0xA2` | 4 bytes            |

Any other header byte raises `filmotheque.binary_reader.FormatError`. Data that
ends too early raises the same error. A string is stored as an integer giving
its length in bytes, followed by those bytes. The bytes are decoded as UTF-8,
or as Latin-1 if they are not valid UTF-8.

The file begins with the number of films. Each film is stored as:

1. title
2. director
3. release year
4. takings, in millions
5. number of actors, followed by that many actors

Each actor is stored as name, year of birth and sex. The sex is an integer
holding a character code.

Actors are shared by name. If an actor already appears in a film read earlier,
that same `Actor` object is reused and no new actor is logged.

### Books (text)

Each book is given by these fields, separated by whitespace:

```
"Title" year "Author" copies_sold_in_millions pages
```

The title and the author are in double quotes, and a backslash escapes the
character that follows it. A title or author without quotes is read as a single
word. Reading a file with a missing or malformed field raises `ValueError`.

## Library use

```python
import sys

from filmotheque.cli import build_items, display_items
from filmotheque.loader import create_film_list, read_books

films = create_film_list("films.bin", log=sys.stdout)
books = read_books("livres.txt")
display_items([*films, *books])  # writes to standard output by default

items = build_items("films.bin", "livres.txt", log=sys.stdout)
```

The `log` argument takes a text stream and defaults to standard output.

### Modules

- `filmotheque.models`
  - `Item` has a title and a release year. `str(item)` gives its display text.
  - `Film` adds a director, takings and an `ActorList`.
  - `Book` adds an author, copies sold and a page count. `Book.from_stream`
    reads a book from a text stream.
  - `FilmBook` combines a film and a book into one item.
  - `Actor` holds one actor.
  - `ActorList` is a fixed-capacity list of actors. Adding an actor past its
    capacity raises `IndexError`.
  - `FilmList` is a growable list of films. `find_actor(name)` returns the first
    actor with that name. `find(criterion)` returns the first film for which
    `criterion(film)` is true. Both return `None` when nothing matches.
- `filmotheque.loader` provides `read_actor`, `read_film`, `create_film_list`
  and `read_books`.
- `filmotheque.binary_reader` provides `read_uint_variable`, `read_string` and
  `FormatError`.
- `filmotheque.cli` provides `display_items`, `build_items` and `main`.
- `filmotheque.iterators` provides iteration helpers:
  - `sorted_by(iterable, less)` sorts with a "less than" predicate.
  - `starmap`.
  - `takewhile`.
  - `unique_everseen` drops every repeat of an element.
  - `unique_justseen` drops consecutive repeats.
- `filmotheque.zipping` provides `zip_shortest` and `zip_longest`. For an
  exhausted input, `zip_longest` fills the position with `None`.

## Limitations

The package only reads and displays collections. It cannot edit them and it
writes no files.