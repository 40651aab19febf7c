"""
Page file discovery.

Lists the page files of a single working directory:
    Series/
    ├── 0001_A_Series_name_c001_v01_p000_Source.jpg
    ├── 0002_A_Series_name_c001_v01_p001_Source.jpg
    ├── .DS_Store        (ignored)
    └── output/          (directories are ignored)

Names are returned verbatim, for the parser to work on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from mangarn.exceptions import DiscoveryError
from mangarn.settings import DEFAULT_IGNORE_FILES

logger = logging.getLogger(__name__)


def list_page_files(
    directory: Path,
    ignore: Iterable[str] = DEFAULT_IGNORE_FILES,
) -> list[str]:
    """
    List candidate page file names in a directory.

    Sub-directories and ignored names are skipped. The result is sorted so
    that repeated runs see files in the same order.

    Args:
        directory: Directory to scan (not recursive)
        ignore: File names to skip (e.g. OS metadata files)

    Returns:
        Sorted list of bare file names

    Raises:
        DiscoveryError: If the directory cannot be read
    """
    ignored = set(ignore)
    names: list[str] = []

    try:
        for path in directory.iterdir():
            if path.is_dir():
                continue
            if path.name in ignored:
                logger.debug("Skipping ignored file: %s", path.name)
                continue
            names.append(path.name)
    except OSError as e:
        raise DiscoveryError(f"Failed to read directory: {e}", path=directory) from e

    names.sort()
    logger.debug("Found %d page file(s) in %s", len(names), directory)
    return names
