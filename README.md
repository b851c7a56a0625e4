# spotifind

A small console catalogue for a song dataset. It reads songs from a CSV
file, indexes them by ID, genre and artist, and lets you search the
collection and put together playlists. The menu and its messages are in
Spanish.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running

```
spotifind
```

This opens the interactive menu:

1. Cargar canciones: asks how many songs to read (the prompt gives 113998
   as the maximum) and loads at most that many rows from the dataset.
2. Buscar por Genero: lists the songs of one genre.
3. Buscar por Artista: lists the songs of one artist and how many there are.
4. Buscar por Tempo: lists the songs whose tempo equals a whole number.
5. Crear Lista de Reproduccion: creates a playlist with a new name.
6. Agregar Cancion a la Lista de Reproduccion: adds a song, chosen by ID,
   to an existing playlist.
7. Mostrar Canciones de una Lista de Reproduccion: shows a playlist's songs.
8. Salir: quits.

After each choice the menu waits for a line of input before showing
itself again. It also stops when input ends. When writing to the terminal
it clears the screen with the `clear` command.

Options:

- `--dataset PATH`: the CSV file to use. Without it the menu loads
  `song_dataset_.csv` from the current directory.
- `--preview`: instead of the menu, print the first songs of the dataset
  (ID, title, artists, album, genre and tempo) and exit. Without
  `--dataset` it reads `data/song_dataset_.csv`. The exit status is 1 if
  the file cannot be opened.
- `--limit N`: how many songs `--preview` prints (default 10).

## Dataset format

The file is comma separated and starts with a header row, which is
skipped. A field may be put in double quotes, and may then contain
commas; a doubled quote (`""`) inside a quoted field stands for one
literal quote. The columns used are:

| column | meaning                                             |
|--------|-----------------------------------------------------|
| 0      | song ID                                             |
| 2      | artists, separated by `;`, spaces trimmed           |
| 3      | album                                               |
| 4      | title                                               |
| 18     | tempo (its leading whole number; 0 if there is none)|
| 20     | genre                                               |

ID, album, title and genre are cut to 99 characters. A row with fewer
than 21 fields stops loading with an error. If an ID appears twice, the
first song keeps the ID, but both are listed under their genre and
artists.

## Using it as a library

```python
from spotifind.library import Library

library = Library()
count = library.load_csv("song_dataset_.csv", 1000)
for song in library.by_genre("acoustic"):
    print(song.title, song.artists, song.tempo)

library.create_playlist("favourites")
library.add_to_playlist("favourites", "0")
print(library.playlist("favourites").songs)
print(library.playlist_names())
```

`Song` (fields `id`, `title`, `artists`, `album`, `tempo`, `genre`) can be
built from a dataset row with `Song.from_row(fields)` and added with
`Library.add_song(song)`. `by_tempo(tempo)` returns a possibly empty list.

`by_genre`, `by_artist`, `create_playlist` (for a name already taken),
`add_to_playlist` and `playlist` raise `spotifind.library.LibraryError`
when there is nothing to search or the genre, artist, playlist or song ID
is unknown.

`spotifind.cli` offers `run_menu(library, stdin, stdout, dataset)`, which
runs the menu on any text streams, `preview(path, limit, stdout)`, and
`format_song(song, fields)`, which renders chosen fields of a song as
labelled lines.

Other helpers in the package:

- `spotifind.csvio`: `parse_csv_line`, `iter_csv_rows` and `split_string`,
  the CSV reading used for the dataset.
- `spotifind.containers`: `KeyedMap`, a key/value map kept in insertion
  order or, given a `lower_than` function, sorted by key; and
  `sorted_insert`, a stable ordered insertion into a list.
- `spotifind.heap`: `Heap`, a max-priority heap; `top()` returns `None`
  when it is empty and `pop()` raises `IndexError`.

## What it does not do

Playlists and loaded songs live only while the program runs; nothing is
saved to disk. Songs cannot be removed from a playlist, and playlists
cannot be deleted or renamed.