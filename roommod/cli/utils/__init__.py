"""CLI utilities."""

from .blob_file import BlobFileError, load_store, save_store

__all__ = ["BlobFileError", "load_store", "save_store"]
