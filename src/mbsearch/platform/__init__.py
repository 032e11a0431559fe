"""Infrastructure adapters: logging and the MusicBrainz WS2 client."""
