import logging
import os
from pathlib import Path


def _same_entry(a: Path, b: Path) -> bool:
    """Whether two paths name the same directory entry, without following links."""
    sa, sb = os.lstat(a), os.lstat(b)
    return (sa.st_dev, sa.st_ino) == (sb.st_dev, sb.st_ino)


class FileEntry:
    """An existing file-system entry that can be renamed within its directory."""

    def __init__(self, path: Path):
        self.path = path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def parent(self) -> Path | None:
        """The containing directory, or None if the entry is a root."""
        parent = self.path.parent
        return None if parent == self.path else parent

    def rename(self, new_name: str) -> Path:
        """Rename the entry in place and return its new path.

        A symbolic link is renamed itself, never its target.

        Raises:
            FileExistsError: If a different entry already has the new name.
        """
        target = self.path.with_name(new_name)
        # Case-only renames on case-insensitive file systems see the target as existing.
        if os.path.lexists(target) and not _same_entry(target, self.path):
            raise FileExistsError(f"Target file already exists: {target}")
        logging.debug(f"Renaming {self.path} to {target}")
        self.path = self.path.rename(target)
        return self.path

    def __repr__(self) -> str:
        return f"FileEntry({str(self.path)!r})"


def resolve(path: str) -> FileEntry:
    """Resolve a path string to an existing file or symbolic link.

    The path is made absolute lexically, so a symbolic link resolves to the
    link, not its target. Directories are rejected, except the root, which is
    returned so the caller can report it as such.

    Raises:
        FileNotFoundError: If no file exists at the path.
    """
    absolute = Path(os.path.abspath(os.path.expanduser(path)))
    if not os.path.lexists(absolute):
        raise FileNotFoundError(f"File not found: {path}")
    if absolute.is_dir() and not absolute.is_symlink() and absolute.parent != absolute:
        raise FileNotFoundError(f"Not a file: {path}")
    return FileEntry(absolute)
