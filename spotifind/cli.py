"""Interactive menu for browsing the song library and managing playlists."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

from .csvio import iter_csv_rows, split_string
from .library import Library, LibraryError, Song

DEFAULT_DATASET = "song_dataset_.csv"
PREVIEW_DATASET = "data/song_dataset_.csv"
MAX_SONGS = 113998

RULE = "=" * 58
SONG_RULE = "=" * 59

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_LABELS = {
    "id": lambda s: f"ID: {s.id}",
    "title": lambda s: f"Nombre Cancion: {s.title}",
    "artists": lambda s: "Artista: " + "".join(f"{a} " for a in s.artists),
    "album": lambda s: f"Album: {s.album}",
    "tempo": lambda s: f"Tempo: {s.tempo}",
    "genre": lambda s: f"Genero: {s.genre}",
}


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def format_song(song: Song, fields: Sequence[str]) -> str:
    """Render the given fields of ``song``, one labelled line each."""
    try:
        return "\n".join(_LABELS[name](song) for name in fields)
    except KeyError as exc:
        raise ValueError(f"unknown song field: {exc.args[0]}") from None


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def preview(
    path: Union[str, PathLike] = PREVIEW_DATASET,
    limit: int = 10,
    stdout: Optional[TextIO] = None,
) -> None:
    """Print the first ``limit`` songs of the dataset at ``path``."""
    out = stdout if stdout is not None else sys.stdout
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as stream:
        rows = iter_csv_rows(stream, ",")
        next(rows, None)
        for shown, fields in enumerate(rows):
            if shown >= limit:
                break
            print(f"ID: {_leading_int(fields[0])}", file=out)
            print(f"Título cancion: {fields[4]}", file=out)
            print("Artistas: ", file=out)
            for artist in split_string(fields[2], ";"):
                print(f"  {artist}", file=out)
            print(f"Album: {fields[3]}", file=out)
            print(f"Género: {fields[20]}", file=out)
            print(f"Tempo: {_leading_float(fields[18]):.2f}", file=out)
            print(" -------------------------------", file=out)


class _Menu:
    def __init__(self, library: Library, stdin: TextIO, stdout: TextIO, dataset) -> None:
        self.library = library
        self.stdin = stdin
        self.stdout = stdout
        self.dataset = dataset
        self.clear = clear_screen if stdout is sys.stdout else (lambda: None)

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def banner(self, title: str) -> None:
        self.say(RULE)
        self.say(title)
        self.say(RULE)

    def error(self, message: str, lead: str = "") -> None:
        self.say(lead + RULE)
        self.say(f"ERROR: {message}")
        self.say(RULE)

    def _line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line

    def _text(self) -> str:
        while True:
            stripped = self._line().rstrip("\r\n").lstrip()
            if stripped:
                return stripped

    def _word(self) -> str:
        return self._text().split()[0]

    def _number(self) -> int:
        return _leading_int(self._word())

    def run(self) -> None:
        actions = {
            "1": (True, self.load),
            "2": (True, self.search_genre),
            "3": (True, self.search_artist),
            "4": (True, self.search_tempo),
            "5": (True, self.create_playlist),
            "6": (False, self.add_to_playlist),
            "7": (True, self.show_playlist),
            "8": (True, self.leave),
        }
        try:
            while True:
                self.show_menu()
                self.write("Ingrese su opcion: ")
                option = self._text()[0]
                if option in actions:
                    clears, action = actions[option]
                    if clears:
                        self.clear()
                    action()
                self.say("Presione una tecla para continuar...")
                self._line()
                if option == "8":
                    return
        except EOFError:
            return

    def show_menu(self) -> None:
        self.clear()
        self.say("=" * 40)
        self.say("     Spotifind     ")
        self.say("=" * 40)
        self.say("1) Cargar canciones")
        self.say("2) Buscar por Genero")
        self.say("3) Buscar por Artista")
        self.say("4) Buscar por Tempo")
        self.say("5) Crear Lista de Reproduccion")
        self.say("6) Agregar Cancion a la Lista de Reproduccion")
        self.say("7) Mostrar Canciones de una Lista de Reproduccion")
        self.say("8) Salir")

    def load(self) -> None:
        self.banner("          CARGAR CANCIONES          ")
        self.write(f"Ingrese canciones desea cargar (MAXIMO SOPORTADO {MAX_SONGS}): ")
        limit = self._number()
        try:
            count = self.library.load_csv(self.dataset, limit)
        except OSError as exc:
            print(f"Error no se logro abrir el archivo: {exc.strerror or exc}", file=sys.stderr)
            return
        except LibraryError as exc:
            self.error(str(exc))
            return
        if count:
            self.write("Ingresando Canciones...")
        self.say(f"Se han cargado exitosamente {count} canciones")
        self.say(RULE)

    def search_genre(self) -> None:
        self.banner("                      BUSCAR POR GENERO")
        if not self.library.genres:
            self.error("No hay generos registrados.", lead="\n\n")
            return
        self.write("Ingrese el genero que desea buscar: ")
        genre = self._text()
        try:
            songs = self.library.by_genre(genre)
        except LibraryError as exc:
            self.error(str(exc))
            return
        self.say("\n" + RULE)
        self.say(f'Canciones encontradas con el genero "{genre}":')
        self.say(RULE)
        for song in songs:
            self.say(format_song(song, ("id", "title", "artists", "album", "tempo")))
            self.say(SONG_RULE)

    def search_artist(self) -> None:
        self.banner("                      BUSCAR POR ARTISTA")
        if not self.library.artists:
            self.error("No hay artistas registrados.", lead="\n\n")
            return
        self.write("Ingrese el nombre del artista: ")
        artist = self._text()
        self.clear()
        self.say(RULE)
        self.say(f'CANCIONES DEL ARTISTA "{artist}":')
        self.say(RULE)
        try:
            songs = self.library.by_artist(artist)
        except LibraryError as exc:
            self.error(str(exc))
            return
        for song in songs:
            self.say(format_song(song, ("id", "title", "album", "tempo")))
            self.say(SONG_RULE)
        self.say(RULE)
        self.say(f"Se han encontrado {len(songs)} canciones para el artista {artist}")

    def search_tempo(self) -> None:
        self.banner("                      BUSCAR POR TEMPO")
        self.say("Ingrese el tempo que desea buscar: ")
        tempo = self._number()
        self.clear()
        self.say(RULE)
        self.say(f'CANCIONES CON TEMPO "{tempo}":')
        self.say(RULE)
        for song in self.library.by_tempo(tempo):
            self.say(format_song(song, ("id", "title", "album", "artists")))
            self.say(SONG_RULE)

    def create_playlist(self) -> None:
        self.banner("          CREAR LISTA DE REPRODUCCION")
        self.say()
        self.write("Ingrese el nombre de la nueva lista de reproduccion: ")
        name = self._text()
        try:
            playlist = self.library.create_playlist(name)
        except LibraryError as exc:
            self.error(str(exc), lead="\n")
            return
        self.say("\n" + RULE)
        self.say(f'La lista de reproduccion "{playlist.name}" ha sido creada exitosamente.')
        self.say(RULE)

    def _list_playlists(self) -> None:
        self.say("Lista de Reproducciones disponibles:")
        for name in self.library.playlist_names():
            self.say(f" - {name}")
        self.say(RULE)
        self.say("Ingrese el nombre de la lista de reproduccion:")

    def add_to_playlist(self) -> None:
        self.banner("          AGREGAR CANCION A LISTA DE REPRODUCCION")
        self.say()
        self._list_playlists()
        name = self._text()
        if name not in self.library.playlists:
            self.error("No existe una lista de reproduccion con ese nombre.", lead="\n")
            return
        self.say("Ingrese el ID de la cancion:")
        song_id = self._word()
        try:
            song = self.library.add_to_playlist(name, song_id)
        except LibraryError as exc:
            self.error(str(exc), lead="\n")
            return
        self.say(
            f'La cancion "{song.title}" se agrego a la lista de reproduccion '
            f'"{name}" correctamente :).'
        )

    def show_playlist(self) -> None:
        self.banner("          MOSTRAR CANCIONES DE UNA LISTA DE REPRODUCCION")
        self.say()
        if not self.library.playlists:
            self.say("\nADVERTENCIA: No hay Listas de Reproduccion guardadas.")
            self.say(RULE)
            return
        self._list_playlists()
        name = self._text()
        try:
            playlist = self.library.playlist(name)
        except LibraryError as exc:
            self.error(str(exc), lead="\n")
            return
        if not playlist.songs:
            self.say(f'La lista de reproduccion "{name}" está vacía.')
            return
        for song in playlist.songs:
            self.say(RULE)
            self.say(
                format_song(song, ("id", "title", "artists", "album", "tempo", "genre"))
            )
            self.say(RULE)

    def leave(self) -> None:
        self.say("Saliendo del programa...")


def run_menu(
    library: Optional[Library] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    dataset: Union[str, PathLike] = DEFAULT_DATASET,
) -> None:
    """Run the interactive menu until the user leaves or input ends."""
    _Menu(
        library if library is not None else Library(),
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
        dataset,
    ).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spotifind", description="Browse a song dataset and build playlists."
    )
    parser.add_argument("--dataset", help="path of the song CSV file")
    parser.add_argument(
        "--preview",
        action="store_true",
        help="print the first songs of the dataset and exit",
    )
    parser.add_argument(
        "--limit", type=int, default=10, help="number of songs shown by --preview"
    )
    args = parser.parse_args(argv)

    if args.preview:
        try:
            preview(args.dataset or PREVIEW_DATASET, args.limit)
        except OSError as exc:
            print(f"Error al abrir el archivo: {exc.strerror or exc}", file=sys.stderr)
            return 1
        return 0

    run_menu(Library(), dataset=args.dataset or DEFAULT_DATASET)
    return 0


if __name__ == "__main__":
    sys.exit(main())