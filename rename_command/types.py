from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

# (base, extension) -> new base. Returning "" leaves the file name unchanged.
Transform = Callable[[str, str], str]


class PathParts(NamedTuple):
    directory: str  # includes the trailing separator, "" if none
    name: str


class NameParts(NamedTuple):
    base: str
    extension: str


@dataclass
class RenameOptions:
    """Options for one rename run."""

    files: list[str] = field(default_factory=list)
    quiet: bool = False
    verbose: bool = False  # overrides quiet
    dry_run: bool = False
    try_out: bool = False  # treat files as one hypothetical name, never touch disk


@dataclass
class RenameResult:
    index: int
    original_name: str
    replacement_name: str
    was_renamed: bool
