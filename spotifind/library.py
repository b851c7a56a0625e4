"""Song catalogue with lookups by id, genre, artist and tempo, plus playlists."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence, Union

from .csvio import iter_csv_rows, split_string

FIELD_LIMIT = 99
MIN_FIELDS = 21

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class LibraryError(Exception):
    """A lookup or update of the library could not be carried out."""


@dataclass
class Song:
    id: str
    title: str
    artists: list[str]
    album: str
    tempo: int
    genre: str

    @classmethod
    def from_row(cls, fields: Sequence[str]) -> "Song":
        """Build a song from one row of the song dataset."""
        if len(fields) < MIN_FIELDS:
            raise LibraryError(
                f"row has {len(fields)} fields, expected at least {MIN_FIELDS}"
            )
        return cls(
            id=fields[0][:FIELD_LIMIT],
            title=fields[4][:FIELD_LIMIT],
            artists=split_string(fields[2], ";"),
            album=fields[3][:FIELD_LIMIT],
            tempo=_leading_int(fields[18]),
            genre=fields[20][:FIELD_LIMIT],
        )


@dataclass
class Playlist:
    name: str
    songs: list[Song] = field(default_factory=list)


class Library:
    """Songs indexed by id, genre and artist, and the user's playlists."""

    def __init__(self) -> None:
        self.songs: dict[str, Song] = {}
        self.genres: dict[str, list[Song]] = {}
        self.artists: dict[str, list[Song]] = {}
        self.playlists: dict[str, Playlist] = {}

    def add_song(self, song: Song) -> bool:
        """Index ``song``; return whether its id was new.

        A repeated id keeps the first song in the id index, but the song is
        still listed under its genre and artists.
        """
        is_new = song.id not in self.songs
        if is_new:
            self.songs[song.id] = song
        self.genres.setdefault(song.genre, []).append(song)
        for artist in song.artists:
            self.artists.setdefault(artist, []).append(song)
        return is_new

    def load_csv(self, path: Union[str, PathLike], limit: int) -> int:
        """Load at most ``limit`` songs from the dataset at ``path``.

        The first line is taken as a header. Returns the number of rows loaded.
        """
        count = 0
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as stream:
            rows = iter_csv_rows(stream, ",")
            next(rows, None)
            for row in rows:
                if count >= limit:
                    break
                self.add_song(Song.from_row(row))
                count += 1
        return count

    def by_genre(self, genre: str) -> list[Song]:
        if not self.genres:
            raise LibraryError("No hay generos registrados.")
        try:
            return list(self.genres[genre])
        except KeyError:
            raise LibraryError(
                "No se encontraron canciones con ese tipo de genero."
            ) from None

    def by_artist(self, artist: str) -> list[Song]:
        if not self.artists:
            raise LibraryError("No hay artistas registrados.")
        try:
            return list(self.artists[artist])
        except KeyError:
            raise LibraryError(
                "No se encontraron canciones para el artista."
            ) from None

    def by_tempo(self, tempo: int) -> list[Song]:
        return [song for song in self.songs.values() if song.tempo == tempo]

    def create_playlist(self, name: str) -> Playlist:
        if name in self.playlists:
            raise LibraryError(
                "Ya existe una lista de reproduccion con ese nombre."
            )
        playlist = Playlist(name)
        self.playlists[name] = playlist
        return playlist

    def add_to_playlist(self, name: str, song_id: str) -> Song:
        """Append the song with ``song_id`` to playlist ``name`` and return it."""
        playlist = self.playlists.get(name)
        if playlist is None:
            raise LibraryError(
                "No existe una lista de reproduccion con ese nombre."
            )
        song = self.songs.get(song_id)
        if song is None:
            raise LibraryError("No se encontro una cancion con ese ID")
        playlist.songs.append(song)
        return song

    def playlist(self, name: str) -> Playlist:
        try:
            return self.playlists[name]
        except KeyError:
            raise LibraryError("No existe una lista con ese nombre.") from None

    def playlist_names(self) -> list[str]:
        return list(self.playlists)