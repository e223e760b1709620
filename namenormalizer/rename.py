"""Apply normalized names to selected files.

Renames in place when the output directory is the files' own directory and
copies otherwise. Per-file failures are reported and recorded, never raised.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from .models import FileInfo, RenameResult
from .naming import CaseStyle, SeparatorPolicy, target_name

logger = logging.getLogger(__name__)


def process_renames(
    files: Sequence[FileInfo],
    output_dir: Path,
    *,
    style: CaseStyle,
    separators: SeparatorPolicy,
    filters: Iterable[str] = (),
    dry_run: bool = False,
    force: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> list[RenameResult]:
    """Rename or copy ``files`` into ``output_dir`` and print a summary."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    filters = list(filters)
    results: list[RenameResult] = []

    for file in files:
        new_name = target_name(file, style, separators, filters)
        old_path = file.path
        new_path = output_dir / new_name

        if dry_run:
            print(f"→ {file.filename} → {new_name}", file=out)
            continue
        if new_path == old_path:
            logger.debug("unchanged: %s", file.filename)
            continue
        if new_path.exists() and not force:
            print(f"⚠ File exists (use --force to override): {new_name}", file=err)
            logger.info("skipped %s: %s exists", file.filename, new_path)
            continue

        try:
            if output_dir.resolve() == old_path.parent.resolve():
                old_path.rename(new_path)
            else:
                shutil.copy2(old_path, new_path)
        except OSError as exc:
            print(f"✗ Failed to rename {file.filename}: {exc}", file=err)
            logger.error("failed to rename %s -> %s: %s", old_path, new_path, exc)
            results.append(RenameResult(file.filename, new_name, success=False, error=str(exc)))
            continue

        print(f"✓ {file.filename} → {new_name}", file=out)
        logger.info("renamed %s -> %s", old_path, new_path)
        results.append(RenameResult(file.filename, new_name, success=True))

    if not dry_run:
        successful = sum(1 for result in results if result.success)
        print(f"\n✓ Successfully renamed {successful}/{len(results)} files", file=out)
    return results
