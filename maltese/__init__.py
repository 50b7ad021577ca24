"""A draggable desktop pet that plays looping frame animations of a Maltese."""

__version__ = "0.1.0"