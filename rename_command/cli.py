#!/usr/bin/env python3


import logging
import re

import click

from .rename_command import RenameError, run_rename
from .transforms import CASE_STYLES, add_prefix, add_suffix, chain, change_case, replace_all, replace_first
from .types import RenameOptions, Transform


def build_transform(
    replacements: tuple[tuple[str, str], ...],
    first_replacements: tuple[tuple[str, str], ...],
    *,
    ignore_case: bool,
    case: str | None,
    prefix: str,
    suffix: str,
) -> Transform:
    """Build the rename rule from the command-line options, in a fixed order."""
    steps: list[Transform] = []
    for option, builder, pairs in (
        ("--replace-first", replace_first, first_replacements),
        ("--replace", replace_all, replacements),
    ):
        for pattern, template in pairs:
            try:
                steps.append(builder(pattern, template, ignore_case=ignore_case))
            except re.error as e:
                raise click.BadParameter(f"invalid pattern {pattern!r}: {e}", param_hint=option) from e
    if case:
        steps.append(change_case(case.lower()))
    if prefix:
        steps.append(add_prefix(prefix))
    if suffix:
        steps.append(add_suffix(suffix))
    return chain(*steps)


@click.command()
@click.argument("files", nargs=-1, required=True)
@click.option(
    "-r",
    "--replace",
    "replacements",
    type=(str, str),
    multiple=True,
    metavar="PATTERN REPLACEMENT",
    help="Replace every regex match in the base name (repeatable)",
)
@click.option(
    "--replace-first",
    "first_replacements",
    type=(str, str),
    multiple=True,
    metavar="PATTERN REPLACEMENT",
    help="Replace the first regex match in the base name (repeatable)",
)
@click.option("-i", "--ignore-case", is_flag=True, help="Match patterns case-insensitively")
@click.option(
    "--case",
    type=click.Choice(CASE_STYLES, case_sensitive=False),
    default=None,
    help="Change the case of the base name",
)
@click.option("--prefix", default="", help="Text to add before the base name")
@click.option("--suffix", default="", help="Text to add after the base name, before the extension")
@click.option("-q", "--quiet", is_flag=True, help="Silent output")
@click.option("-v", "--verbose", is_flag=True, help='Verbose output (overrides "--quiet")')
@click.option("-n", "--dry-run", is_flag=True, help="Show changes without renaming")
@click.option(
    "--try",
    "try_out",
    is_flag=True,
    help="Treat FILES as a single hypothetical file name and show how it would be renamed",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level (default: WARNING)",
)
def main(
    files: tuple[str, ...],
    replacements: tuple[tuple[str, str], ...],
    first_replacements: tuple[tuple[str, str], ...],
    ignore_case: bool,
    case: str | None,
    prefix: str,
    suffix: str,
    quiet: bool,
    verbose: bool,
    dry_run: bool,
    try_out: bool,
    log_level: str,
) -> None:
    """Rename FILES by transforming their names, keeping the extensions."""
    # Set up logging
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("rename_command"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    transform = build_transform(
        replacements,
        first_replacements,
        ignore_case=ignore_case,
        case=case,
        prefix=prefix,
        suffix=suffix,
    )
    options = RenameOptions(
        files=list(files),
        quiet=quiet,
        verbose=verbose,
        dry_run=dry_run,
        try_out=try_out,
    )

    try:
        count = run_rename(options, transform)
    except RenameError as e:
        raise click.ClickException(str(e)) from e

    if not try_out:
        logging.info(f"{count} file(s) {'would be ' if dry_run else ''}renamed")


if __name__ == "__main__":
    main()
