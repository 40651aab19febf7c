"""
Chapter renumbering for flat page dumps.

Some releases ship every page of a volume in one directory as
"<absolute>_<relative>.<ext>", where the relative number restarts at each
chapter and no chapter marker is present:

    0001_000.jpg, 0002_001.jpg, ..., 0031_000.jpg, 0032_001.jpg

Walking the files in order and starting a new chapter whenever the
relative number drops gives names the parser understands:

    "0001 Title v1 c1 p000.jpg", ..., "0031 Title v1 c2 p000.jpg"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mangarn.exceptions import RenumberError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rename:
    """A single planned rename."""

    source: str
    target: str
    chapter: int


def split_flat_name(name: str) -> tuple[str, str, str]:
    """
    Split "<absolute>_..._<relative>.<ext>" into its parts.

    The absolute part is everything before the first underscore and the
    relative part everything between the last underscore and the extension.
    Both are returned verbatim so leading zeros survive.

    Returns:
        (absolute, relative, extension) without the dot

    Raises:
        RenumberError: If the name does not follow the pattern or the
            relative part is not a number
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or "_" not in stem:
        raise RenumberError(
            f"Expected <absolute>_<relative>.<ext>, got: {name}",
            file_name=name,
        )

    absolute = stem.split("_", 1)[0]
    relative = stem.rsplit("_", 1)[1]
    if not (relative.isascii() and relative.isdigit()):
        raise RenumberError(
            f"Relative page number is not a number in: {name}",
            file_name=name,
        )
    return absolute, relative, ext


def plan_renames(names: Iterable[str], title: str, volume: int = 1) -> list[Rename]:
    """
    Plan chapter-numbered names for a flat page dump.

    Args:
        names: File names to renumber (processed in sorted order)
        title: Series title written into every new name
        volume: Volume number written into every new name

    Returns:
        One Rename per input name, in processing order

    Raises:
        RenumberError: If any name does not fit the flat pattern
    """
    if not title.strip():
        raise RenumberError("A title is required to renumber pages")

    renames: list[Rename] = []
    chapter = 1
    last_relative = 0

    for name in sorted(names):
        absolute, relative, ext = split_flat_name(name)
        relative_number = int(relative)
        if relative_number < last_relative:
            chapter += 1

        target = f"{absolute} {title} v{volume} c{chapter} p{relative}.{ext}"
        renames.append(Rename(source=name, target=target, chapter=chapter))
        last_relative = relative_number

    return renames


def apply_renames(directory: Path, renames: Iterable[Rename]) -> int:
    """
    Rename files in a directory according to a plan.

    Existing files are never overwritten.

    Returns:
        Number of files renamed

    Raises:
        RenumberError: If a target exists or a rename fails
    """
    count = 0
    for rename in renames:
        source = directory / rename.source
        target = directory / rename.target
        if target.exists() and source != target:
            raise RenumberError(
                f"Refusing to overwrite existing file: {rename.target}",
                file_name=rename.source,
            )
        try:
            source.rename(target)
        except OSError as e:
            raise RenumberError(
                f"Failed to rename {rename.source}: {e}",
                file_name=rename.source,
            ) from e

        logger.info("%s -> %s", rename.source, rename.target)
        count += 1
    return count
