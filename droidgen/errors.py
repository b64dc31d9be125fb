"""Exception hierarchy for droidgen.

Every error the CLI reports to the user derives from :class:`DroidgenError`.
Convention probing never raises; its failures are folded into
``NOT_FOUND`` markers by :mod:`droidgen.prober`.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class DroidgenError(Exception):
    """Base class for all droidgen errors."""

    kind = "DroidgenError"


class UnknownTemplateError(DroidgenError):
    """Raised when a template id is not present in the registry."""

    kind = "UnknownTemplateError"

    def __init__(self, template_id: str, known_ids: Iterable[str]) -> None:
        self.template_id = template_id
        self.known_ids = list(known_ids)
        known = ", ".join(self.known_ids) or "<none>"
        super().__init__(f"Unknown template '{template_id}'. Known templates: {known}")


class DuplicateTemplateError(DroidgenError):
    """Raised when registering a template id twice."""

    kind = "DuplicateTemplateError"

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template '{template_id}' is already registered")


class RegistryFrozenError(DroidgenError):
    """Raised when registering into a registry that has been frozen."""

    kind = "RegistryFrozenError"

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(
            f"Cannot register '{template_id}': the template registry is read-only"
        )


class InvalidNameError(DroidgenError):
    """Raised when the base name is not identifier-like."""

    kind = "InvalidNameError"

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(
            f"Invalid base name {name!r}: expected an identifier matching {pattern}"
        )


class TemplateSubstitutionError(DroidgenError):
    """Raised when a template references a placeholder that cannot be resolved.

    This points at a defect in the template definition, not at user input.
    """

    kind = "TemplateSubstitutionError"

    def __init__(self, template_id: str, placeholder: str, location: str) -> None:
        self.template_id = template_id
        self.placeholder = placeholder
        self.location = location
        super().__init__(
            f"Template '{template_id}' references unknown placeholder "
            f"'{placeholder}' in {location}"
        )


class FileConflictError(DroidgenError):
    """Raised by the file writer when generated files already exist."""

    kind = "FileConflictError"

    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths = list(paths)
        listing = ", ".join(str(p) for p in self.paths)
        super().__init__(f"Refusing to overwrite existing files: {listing}")


class FileWriteError(DroidgenError):
    """Raised by the file writer when a generated file cannot be written.

    Files written earlier in the same run have been rolled back.
    """

    kind = "FileWriteError"

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason.strerror or reason}")


class ConfigError(DroidgenError):
    """Raised when the configuration file or environment cannot be loaded."""

    kind = "ConfigError"

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration from {source}: {reason}")
