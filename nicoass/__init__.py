"""nicoass: convert niconico live comments into ASS subtitles."""

__version__ = "0.1.0"
