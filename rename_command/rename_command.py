import enum
import logging
from collections.abc import Callable

from . import filesystem
from .filesystem import FileEntry
from .reporter import ConsoleReporter, Reporter
from .types import RenameOptions, RenameResult, Transform
from .utils import join_extension, split_extension, split_path


class RenameErrorKind(enum.Enum):
    CANNOT_RENAME_ROOT = "cannot rename root"
    FILE_NOT_FOUND = "file not found"
    FILE_SYSTEM_RENAME_FAILED = "rename failed"
    TRANSFORM_FAILED = "transform failed"


class RenameError(Exception):
    """Exception raised when a file cannot be renamed. Aborts the run."""

    def __init__(self, kind: RenameErrorKind, path: str, reason: str | None = None):
        self.kind = kind
        self.path = path
        message = f"Cannot rename {path}: {kind.value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def rename_base(name: str, transform: Transform, *, path: str | None = None) -> str:
    """Return the replacement for file name `name` under `transform`.

    The transform only sees the base name and its result keeps the original
    extension. An empty result, or one equal to the original base, leaves
    `name` untouched.
    """
    base, extension = split_extension(name)
    try:
        new_base = transform(base, extension)
    except Exception as e:
        raise RenameError(RenameErrorKind.TRANSFORM_FAILED, path or name, str(e)) from e
    if not new_base or new_base == base:
        return name
    return join_extension(new_base, extension)


def report_before(reporter: Reporter, index: int, path: str) -> None:
    reporter.line(f"{index}. {path}")


def report_after(reporter: Reporter, result: RenameResult, options: RenameOptions) -> None:
    """Write the line describing what happened to one file.

    Verbose output is indented under the numbered line written by
    `report_before`. Otherwise `quiet` hides the line, but only for a real run:
    dry runs and try runs exist to show their results.
    """
    if options.verbose:
        indent = " " * len(str(result.index))
        if result.was_renamed:
            reporter.line(f"{indent}  renamed to {result.replacement_name}")
        else:
            reporter.line(f"{indent}  not renamed")
        return

    if options.quiet and not (options.dry_run or options.try_out):
        return
    if result.was_renamed:
        reporter.line(f"'{result.original_name}' renamed to '{result.replacement_name}'")
    else:
        reporter.line(f"'{result.original_name}' not renamed")


def try_rename(options: RenameOptions, transform: Transform, reporter: Reporter) -> RenameResult | None:
    """Run the transform over a hypothetical file name, without touching the file system.

    The name is the words of `options.files` joined by spaces, so an unquoted
    name on the command line still works.
    """
    full = " ".join(f for f in options.files if f)
    file_name = split_path(full).name
    if not file_name:
        return None

    index = 1
    if options.verbose:
        report_before(reporter, index, full)
    replacement = rename_base(file_name, transform, path=full)
    result = RenameResult(index, file_name, replacement, replacement != file_name)
    report_after(reporter, result, options)
    return result


def run_rename(
    options: RenameOptions,
    transform: Transform,
    *,
    reporter: Reporter | None = None,
    resolve: Callable[[str], FileEntry] = filesystem.resolve,
) -> int:
    """Rename files by transforming their base names.

    Args:
        options: Files to rename and output/dry-run flags
        transform: Maps (base, extension) to a new base name
        reporter: Destination for report lines, the terminal by default
        resolve: Looks up a path on the file system

    Returns:
        The number of files whose name changed (or would change, for a dry
        run). Try runs always return 0.

    Raises:
        RenameError: On the first file that cannot be resolved, transformed or
            renamed. Files renamed before the failure stay renamed.
    """
    reporter = reporter or ConsoleReporter()

    if options.try_out:
        try_rename(options, transform, reporter)
        return 0

    index = 0
    renamed = 0
    for path in options.files:
        if not split_path(path).name:
            logging.debug(f"Skipping {path!r}: no file name")
            continue
        index += 1

        try:
            entry = resolve(path)
        except FileNotFoundError as e:
            raise RenameError(RenameErrorKind.FILE_NOT_FOUND, path) from e
        if entry.parent is None:
            raise RenameError(RenameErrorKind.CANNOT_RENAME_ROOT, path)

        file_name = entry.name
        if options.verbose:
            report_before(reporter, index, str(entry.path))

        replacement = rename_base(file_name, transform, path=path)
        result = RenameResult(index, file_name, replacement, replacement != file_name)

        if result.was_renamed:
            if not options.dry_run:
                try:
                    entry.rename(replacement)
                except OSError as e:
                    raise RenameError(RenameErrorKind.FILE_SYSTEM_RENAME_FAILED, path, str(e)) from e
            renamed += 1
        else:
            logging.debug(f"{path} unchanged")

        report_after(reporter, result, options)

    return renamed
