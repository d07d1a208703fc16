"""A command-line tool that batch renames files by transforming their base names."""

from .rename_command import RenameError, RenameErrorKind, run_rename
from .types import RenameOptions
from .utils import join_extension, split_extension, split_path

__all__ = [
    "RenameError",
    "RenameErrorKind",
    "RenameOptions",
    "join_extension",
    "run_rename",
    "split_extension",
    "split_path",
]
