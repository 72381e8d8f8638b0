# filemeta/extension.py

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

UNKNOWN_EXTENSION = "Unknown"

# Exact, case-sensitive match on the extension without the dot.
EXTENSION_TYPES: Mapping[str, str] = MappingProxyType({
    "txt": "Text File",
    "c": "C Source File",
    "cpp": "C++ Source File",
    "h": "C/C++ Header File",
    "lnk": "Windows Shortcut",
    "java": "Java Source File",
    "class": "Java Class File",
    "sh": "Shell script",
    "pdf": "PDF",
    "crx": "Chrome Extension",
    "mp3": "MP3 File",
    "mp4": "MP4 File",
    "zip": "ZIP Archive",
    "ico": "Computer ICO File",
    "gif": "GIF",
    "jpg": "JPG Image",
    "png": "PNG Image",
    "iso": "ISO Live Disk",
})


def get_file_name(path: str) -> str:
    """Return the unqualified file name (text after the last '/')."""
    return path[path.rfind("/") + 1:]


def get_file_extension(path: str) -> str:
    """Return the final extension of the file name, without the dot.

    Only the last path segment is considered, so a dot in a directory name
    (``a.b/name``) does not produce an extension.

    Args:
        path (str): File path as given on the command line.

    Returns:
        str: Extension, or "" if the file name has no dot.
    """
    name = get_file_name(path)
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot + 1:]


def get_extension_type(extension: str) -> str:
    """Return the description for an extension, or "Unknown"."""
    return EXTENSION_TYPES.get(extension, UNKNOWN_EXTENSION)
