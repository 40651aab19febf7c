"""
CBZ archive writing.

Each bucket becomes one archive in the output directory:
    output/
    ├── A Random Name Vol.14 Ch.118.cbz
    │   ├── Image 1.jpg
    │   └── Image 2.jpg
    └── A Random Name Vol.15.cbz      (chapter 0: no chapter suffix)

Page files are stored as "Image <page_number><extension>". A bucket that fails
halfway never leaves a truncated archive behind.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from mangarn.exceptions import ArchiveError
from mangarn.models import Bucket, ParsedEntry
from mangarn.utils.paths import ensure_dir, safe_filename

logger = logging.getLogger(__name__)


def archive_entry_name(entry: ParsedEntry) -> str:
    """Name of a page inside its archive, e.g. "Image 60.jpg"."""
    return f"Image {entry.page_number}{entry.extension}"


def archive_path(bucket: Bucket, output_dir: Path) -> Path:
    """Destination path of a bucket's archive."""
    return output_dir / safe_filename(bucket.archive_name)


def write_bucket(bucket: Bucket, source_dir: Path, output_dir: Path) -> Path:
    """
    Write a bucket's pages to a CBZ archive.

    Args:
        bucket: Pages of one (title, volume, chapter)
        source_dir: Directory containing the page files
        output_dir: Directory for the archive (created if missing)

    Returns:
        Path to the written archive

    Raises:
        ArchiveError: If the output directory, archive or a page file
            cannot be created or read
    """
    try:
        ensure_dir(output_dir)
    except OSError as e:
        raise ArchiveError(f"Failed to create output directory: {e}", path=output_dir) from e

    out_path = archive_path(bucket, output_dir)
    # Written under a temporary name and moved into place once complete
    partial = out_path.with_name(f"{out_path.name}.part")
    seen: set[str] = set()

    try:
        with zipfile.ZipFile(partial, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for entry in bucket.entries:
                save_name = archive_entry_name(entry)
                if save_name in seen:
                    logger.warning(
                        "Duplicate page %s in %s (from %s)",
                        save_name,
                        out_path.name,
                        entry.file_name,
                    )
                seen.add(save_name)

                source = source_dir / entry.file_name
                logger.info("Saving %s as %s", entry, save_name)
                try:
                    zf.write(source, arcname=save_name)
                except OSError as e:
                    raise ArchiveError(
                        f"Failed to copy file to cbz: {e}",
                        path=out_path,
                        source_path=source,
                    ) from e
        partial.replace(out_path)
    except OSError as e:
        raise ArchiveError(f"Failed to write archive: {e}", path=out_path) from e
    finally:
        # Already moved on success
        partial.unlink(missing_ok=True)

    logger.debug("Wrote %d page(s) to %s", len(bucket), out_path)
    return out_path
