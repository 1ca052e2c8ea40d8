"""medialib - schema model and async data-access sessions for a desktop media library."""

__version__ = "0.1.0"
