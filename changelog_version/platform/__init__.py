"""Platform collaborators: file access and date formatting."""

from .dates import format_date
from .files import FileSystem, LocalFileSystem

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "format_date",
]
