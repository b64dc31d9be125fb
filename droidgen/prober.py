"""Convention prober.

Inspects an existing Android project to discover where things live (the DI
module, the Room database, the navigation graph) and which base package and
base classes it uses.  Probing is advisory: every probe either yields a value
or the ``NOT_FOUND`` marker, and a missing or unreadable project root yields a
``Convention`` in which every key is ``NOT_FOUND``.

The directory walk is bounded by :class:`~droidgen.config.ProbeConfig`
(maximum depth and maximum number of files), so probing a huge tree or the
filesystem root terminates quickly.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Optional, Union

from droidgen.config import ProbeConfig


class Marker(str, Enum):
    """Explicit marker for a convention the prober could not discover."""

    NOT_FOUND = "not-found"


NOT_FOUND = Marker.NOT_FOUND

ConventionValue = Union[str, Marker]

# Ordered; ``Convention`` iterates in this order.
CONVENTION_KEYS: tuple[str, ...] = (
    "base-package",
    "source-root",
    "test-root",
    "di-module-path",
    "database-path",
    "navigation-path",
    "base-viewmodel",
)

_LOCAL_STORAGE_DIRS = frozenset({"local", "db", "database", "room", "persistence"})

_GRADLE_NAMESPACE_RE = re.compile(r"""\bnamespace\s*=?\s*["']([\w.]+)["']""")
_GRADLE_APPLICATION_ID_RE = re.compile(r"""\bapplicationId\s*=?\s*["']([\w.]+)["']""")
_MANIFEST_PACKAGE_RE = re.compile(r"""<manifest\b[^>]*\bpackage\s*=\s*["']([\w.]+)["']""", re.S)
_BASE_VIEWMODEL_RE = re.compile(r"\babstract\s+class\s+(Base\w*ViewModel)\b")


# ---------------------------------------------------------------------------
# Convention
# ---------------------------------------------------------------------------


class Convention(Mapping[str, ConventionValue]):
    """Read-only mapping of convention key -> discovered value or ``NOT_FOUND``.

    Every key in :data:`CONVENTION_KEYS` is always present.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        data: dict[str, ConventionValue] = {key: NOT_FOUND for key in CONVENTION_KEYS}
        for key, value in (values or {}).items():
            if key not in data:
                raise KeyError(f"Unknown convention key: {key}")
            data[key] = value if value else NOT_FOUND
        self._data = data

    @classmethod
    def empty(cls) -> "Convention":
        """A convention in which nothing was found."""
        return cls()

    def __getitem__(self, key: str) -> ConventionValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Convention({self.as_dict()!r})"

    def found(self, key: str) -> bool:
        """Return ``True`` if *key* holds a discovered value."""
        return self._data[key] is not NOT_FOUND

    def value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the discovered value for *key*, or *default*."""
        raw = self._data[key]
        return default if raw is NOT_FOUND else str(raw)

    def missing(self) -> list[str]:
        """Keys that were not discovered, in probe order."""
        return [key for key in self._data if not self.found(key)]

    def as_dict(self) -> dict[str, str]:
        """Plain string mapping, ``NOT_FOUND`` rendered as ``"not-found"``."""
        return {
            key: value.value if isinstance(value, Marker) else value
            for key, value in self._data.items()
        }


# ---------------------------------------------------------------------------
# Prober
# ---------------------------------------------------------------------------


class ProjectFiles:
    """Bounded snapshot of a project's files, relative to its root."""

    def __init__(self, root: Path, files: list[PurePosixPath]) -> None:
        self.root = root
        self.files = files

    def exists(self, relative: str) -> bool:
        return (self.root / relative).exists()

    def read(self, relative: Union[str, PurePosixPath]) -> str:
        return (self.root / relative).read_text(encoding="utf-8", errors="replace")

    def matching(self, predicate: Callable[[PurePosixPath], bool]) -> list[PurePosixPath]:
        return [f for f in self.files if predicate(f)]


Probe = Callable[[ProjectFiles], Optional[str]]


class ConventionProber:
    """Runs the fixed probe list against a project root.

    Usage::

        prober = ConventionProber()
        convention = prober.probe("/path/to/android-project")
        convention.value("di-module-path")
    """

    def __init__(self, config: Optional[ProbeConfig] = None) -> None:
        self.config = config or ProbeConfig()
        self._probes: dict[str, Probe] = {
            "base-package": _probe_base_package,
            "source-root": _probe_source_root,
            "test-root": _probe_test_root,
            "di-module-path": _probe_di_module,
            "database-path": _probe_database,
            "navigation-path": _probe_navigation,
            "base-viewmodel": _probe_base_viewmodel,
        }

    def probe(self, project_root: Union[str, Path, None]) -> Convention:
        """Probe *project_root* and return a fresh :class:`Convention`."""
        if project_root is None:
            return Convention.empty()
        root = Path(project_root)
        try:
            if not root.is_dir():
                return Convention.empty()
            snapshot = ProjectFiles(root, self._scan(root))
        except OSError:
            return Convention.empty()

        values: dict[str, str] = {}
        for key, probe in self._probes.items():
            try:
                result = probe(snapshot)
            except (OSError, ValueError):
                result = None
            if result:
                values[key] = result
        return Convention(values)

    def _scan(self, root: Path) -> list[PurePosixPath]:
        """Walk *root*, bounded by directory depth and file count."""
        skip = set(self.config.skip_dirs)
        files: list[PurePosixPath] = []
        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = Path(dirpath).relative_to(root)
            depth = len(rel_dir.parts)
            if depth >= self.config.max_depth:
                dirnames[:] = []
            else:
                dirnames[:] = sorted(d for d in dirnames if d not in skip)
            for filename in sorted(filenames):
                files.append(PurePosixPath(rel_dir.as_posix()) / filename)
                if len(files) >= self.config.max_files:
                    return files
        return files


# ---------------------------------------------------------------------------
# Probes
# ---------------------------------------------------------------------------


def _first_existing(project: ProjectFiles, candidates: tuple[str, ...]) -> Optional[str]:
    for candidate in candidates:
        if project.exists(candidate):
            return candidate
    return None


def _probe_base_package(project: ProjectFiles) -> Optional[str]:
    for gradle in ("app/build.gradle.kts", "app/build.gradle"):
        if not project.exists(gradle):
            continue
        text = project.read(gradle)
        for pattern in (_GRADLE_NAMESPACE_RE, _GRADLE_APPLICATION_ID_RE):
            match = pattern.search(text)
            if match:
                return match.group(1)

    manifests = ["app/src/main/AndroidManifest.xml"] + [
        str(f) for f in project.matching(lambda f: f.name == "AndroidManifest.xml")
    ]
    for manifest in manifests:
        if not project.exists(manifest):
            continue
        match = _MANIFEST_PACKAGE_RE.search(project.read(manifest))
        if match:
            return match.group(1)
    return None


def _probe_source_root(project: ProjectFiles) -> Optional[str]:
    return _first_existing(project, ("app/src/main/java", "app/src/main/kotlin"))


def _probe_test_root(project: ProjectFiles) -> Optional[str]:
    return _first_existing(project, ("app/src/test/java", "app/src/test/kotlin"))


def _is_kotlin(path: PurePosixPath) -> bool:
    return path.suffix == ".kt"


def _probe_di_module(project: ProjectFiles) -> Optional[str]:
    hits = project.matching(
        lambda f: _is_kotlin(f) and f.stem.endswith("Module") and "di" in f.parts[:-1]
    )
    return str(hits[0]) if hits else None


def _probe_database(project: ProjectFiles) -> Optional[str]:
    hits = project.matching(
        lambda f: f.suffix in (".kt", ".java")
        and "Database" in f.stem
        and any(part in _LOCAL_STORAGE_DIRS for part in f.parts[:-1])
    )
    return str(hits[0]) if hits else None


def _probe_navigation(project: ProjectFiles) -> Optional[str]:
    hits = project.matching(lambda f: _is_kotlin(f) and "Nav" in f.stem)
    return str(hits[0]) if hits else None


def _probe_base_viewmodel(project: ProjectFiles) -> Optional[str]:
    candidates = project.matching(
        lambda f: _is_kotlin(f) and f.stem.startswith("Base") and f.stem.endswith("ViewModel")
    )
    for candidate in candidates:
        match = _BASE_VIEWMODEL_RE.search(project.read(candidate))
        if match:
            return match.group(1)
    return None
