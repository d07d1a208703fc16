"""Utility functions for rename-command."""

import os

from .types import NameParts, PathParts

_SEPARATORS = {"/", os.sep} | ({os.altsep} if os.altsep else set())


def split_path(full: str) -> PathParts:
    """Split a path into its directory prefix and file name.

    The directory prefix keeps its trailing separator, so the two parts
    concatenate back to the original string. A path without a separator has
    an empty directory prefix.
    """
    cut = max(full.rfind(sep) for sep in _SEPARATORS)
    return PathParts(full[: cut + 1], full[cut + 1 :])


def split_extension(name: str) -> NameParts:
    """Split a file name into base name and extension.

    Splits at the last '.', but only when that leaves a non-empty base, so
    dotfiles such as ".gitignore" have no extension. The extension may be
    empty ("file." gives ("file", "")).
    """
    dot = name.rfind(".")
    if dot <= 0:
        return NameParts(name, "")
    return NameParts(name[:dot], name[dot + 1 :])


def join_extension(base: str, extension: str) -> str:
    """Recombine a base name and extension without inventing a trailing dot."""
    return f"{base}.{extension}" if extension else base


def apply_case_style(text: str, case_style: str | None) -> str:
    """Apply the specified case style to text.

    Args:
        text: The text to apply case style to
        case_style: The case style to apply. One of 'lower', 'upper', 'title', 'sentence', or None

    Returns:
        The text with the specified case style applied
    """
    if not text or case_style is None:
        return text

    match case_style:
        case "lower":
            return text.lower()
        case "upper":
            return text.upper()
        case "title":
            return text.title()
        case "sentence":
            return text.capitalize()
        case _:
            return text
