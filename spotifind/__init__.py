"""Song catalogue with search by genre, artist and tempo, playlists, and the CSV and container helpers it uses."""

__version__ = "0.1.0"