"""File writer for generation results.

The generator is pure; this module is the collaborator that puts its output
on disk.  Existing files are never overwritten unless ``overwrite=True``: the
conflict check runs before anything is written, so a refused write leaves the
project untouched.  A write that fails midway is rolled back: files created in
the run are removed, overwritten files get their previous content back and
directories created in the run are removed again.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress
from pathlib import Path
from typing import Optional

from droidgen.errors import FileConflictError, FileWriteError
from droidgen.scaffolder.models import GenerationResult


def find_conflicts(result: GenerationResult, project_root: str | Path) -> list[Path]:
    """Return the target paths of *result* that already exist."""
    root = Path(project_root)
    return [root / f.path for f in result.files if (root / f.path).exists()]


async def write_result(
    result: GenerationResult,
    project_root: str | Path,
    *,
    overwrite: bool = False,
) -> list[Path]:
    """Write every generated file of *result* under *project_root*.

    Parent directories are created automatically.  Either every file is
    written or, on failure, the project is restored to its previous state.

    Args:
        result: Output of :meth:`Generator.generate`.
        project_root: Directory the generated paths are relative to.
        overwrite: Replace files that already exist.

    Returns:
        The written paths, in generation order.

    Raises:
        FileConflictError: If a target exists and *overwrite* is ``False``.
        FileWriteError: If a file or one of its parent directories cannot be
            created.
    """
    root = Path(project_root)
    if not overwrite:
        conflicts = await asyncio.to_thread(find_conflicts, result, root)
        if conflicts:
            raise FileConflictError(conflicts)

    written: list[Path] = []
    originals: dict[Path, Optional[str]] = {}
    created_dirs: list[Path] = []
    for generated in result.files:
        out = root / generated.path
        try:
            originals[out] = await asyncio.to_thread(_read_existing, out)
            created_dirs.extend(await asyncio.to_thread(_missing_dirs, out.parent))
            await asyncio.to_thread(_write_file, out, generated.body)
        except OSError as exc:
            await asyncio.to_thread(_rollback, originals, created_dirs)
            raise FileWriteError(out, exc) from exc
        written.append(out)
    return written


def _read_existing(path: Path) -> Optional[str]:
    """Current content of *path*, or ``None`` if it is not a file yet."""
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return None


def _missing_dirs(directory: Path) -> list[Path]:
    """Ancestors of *directory* (inclusive) that do not exist, outermost first."""
    return [d for d in reversed((directory, *directory.parents)) if not d.exists()]


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _rollback(originals: dict[Path, Optional[str]], created_dirs: list[Path]) -> None:
    """Undo a partial write.  Best effort: the triggering error is re-raised."""
    for path, original in originals.items():
        with suppress(OSError):
            if original is None:
                path.unlink(missing_ok=True)
            else:
                path.write_text(original, encoding="utf-8")
    for directory in reversed(created_dirs):
        with suppress(OSError):
            directory.rmdir()
