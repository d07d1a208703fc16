"""Builders for the transform callbacks passed to `run_rename`.

A transform receives the base name and extension of a file and returns the new
base name. The extension is informational only; it cannot be changed.
"""

import re

from .types import Transform
from .utils import apply_case_style

CASE_STYLES = ("upper", "lower", "title", "sentence")


def _compile(pattern: str, ignore_case: bool) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE if ignore_case else 0)


def replace_first(pattern: str, template: str, *, ignore_case: bool = False) -> Transform:
    """Replace the first match of `pattern` in the base name with `template`.

    `template` uses `re.sub` syntax, so groups are referenced as `\\1` or `\\g<name>`.

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    regex = _compile(pattern, ignore_case)

    def transform(base: str, extension: str) -> str:
        return regex.sub(template, base, count=1)

    return transform


def replace_all(pattern: str, template: str, *, ignore_case: bool = False) -> Transform:
    """Replace every match of `pattern` in the base name with `template`."""
    regex = _compile(pattern, ignore_case)

    def transform(base: str, extension: str) -> str:
        return regex.sub(template, base)

    return transform


def change_case(style: str) -> Transform:
    if style not in CASE_STYLES:
        raise ValueError(f"Unknown case style: {style}")

    def transform(base: str, extension: str) -> str:
        return apply_case_style(base, style)

    return transform


def add_prefix(text: str) -> Transform:
    return lambda base, extension: f"{text}{base}"


def add_suffix(text: str) -> Transform:
    return lambda base, extension: f"{base}{text}"


def identity(base: str, extension: str) -> str:
    return base


def chain(*transforms: Transform) -> Transform:
    """Compose transforms, applying them left to right to the base name."""
    if not transforms:
        return identity

    def transform(base: str, extension: str) -> str:
        for step in transforms:
            base = step(base, extension)
        return base

    return transform
