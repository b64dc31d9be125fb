"""Template generator.

Takes a template id, a base name and an optional probed ``Convention`` and
produces the ordered ``(path, body)`` pairs plus the manual follow-up steps.
The generator is pure: it never touches the filesystem.  Writing the result is
the job of :mod:`droidgen.scaffolder.writer`.
"""

from __future__ import annotations

from typing import Any, Optional

from droidgen.config import Config
from droidgen.errors import TemplateSubstitutionError
from droidgen.naming import NamingForms, derive_naming_forms
from droidgen.prober import CONVENTION_KEYS, Convention
from droidgen.scaffolder.models import GeneratedFile, GenerationResult, ManualStep, Template
from droidgen.scaffolder.registry import TemplateRegistry, default_registry
from droidgen.scaffolder.templates import TemplateRenderer

# Placeholders filled from the probed convention (or the configured defaults).
CONVENTION_SLOTS: frozenset[str] = frozenset(
    {"package", "package_path", "source_root", "test_root", "viewmodel_base"}
)


def known_placeholders() -> frozenset[str]:
    """Every placeholder a template may reference."""
    return NamingForms.placeholder_names() | CONVENTION_SLOTS


class Generator:
    """Applies registered templates to a base name.

    A single instance holds no per-request state and may be shared between
    threads.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.config = config or Config()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        template_id: str,
        base_name: str,
        conventions: Optional[Convention] = None,
    ) -> GenerationResult:
        """Render *template_id* for *base_name*.

        Args:
            template_id: Registered template identifier.
            base_name: Identifier-like base name, e.g. ``"Product"``.
            conventions: Probed project conventions.  Defaults to a
                convention in which nothing was found.

        Returns:
            The rendered files and manual steps.

        Raises:
            UnknownTemplateError: If *template_id* is not registered.
            InvalidNameError: If *base_name* is not identifier-like.
            TemplateSubstitutionError: If the template references a
                placeholder that does not exist.  No output is produced.
        """
        template = self.registry.lookup(template_id)
        forms = derive_naming_forms(base_name)
        conventions = conventions if conventions is not None else Convention.empty()

        self.check_placeholders(template)
        context = self._build_context(forms, conventions)

        files = tuple(
            GeneratedFile(
                path=self._render(template, skeleton.path, context, f"path of file #{index}"),
                body=self._render(template, skeleton.body, context, f"body of file #{index}"),
            )
            for index, skeleton in enumerate(template.files, start=1)
        )
        steps = tuple(
            self._render_step(template, step, context, conventions, index)
            for index, step in enumerate(template.manual_steps, start=1)
        )
        return GenerationResult(
            template_id=template.id,
            base_name=base_name,
            files=files,
            manual_steps=steps,
        )

    def check_placeholders(self, template: Template) -> None:
        """Fail fast if *template* references an unknown placeholder.

        Raises:
            TemplateSubstitutionError: Naming the first offending placeholder.
        """
        known = known_placeholders()
        patterns: list[tuple[str, str]] = []
        for index, skeleton in enumerate(template.files, start=1):
            patterns.append((f"path of file #{index}", skeleton.path))
            patterns.append((f"body of file #{index}", skeleton.body))
        for index, step in enumerate(template.manual_steps, start=1):
            patterns.append((f"manual step #{index}", step.text))
            if step.convention is not None and step.convention not in CONVENTION_KEYS:
                raise TemplateSubstitutionError(
                    template.id, step.convention, f"convention of manual step #{index}"
                )

        for location, pattern in patterns:
            unknown = sorted(self.renderer.placeholders(pattern) - known)
            if unknown:
                raise TemplateSubstitutionError(template.id, unknown[0], location)

    # -- Context building --------------------------------------------------

    def _build_context(self, forms: NamingForms, conventions: Convention) -> dict[str, Any]:
        package = conventions.value("base-package", self.config.default_package)
        return {
            **forms.as_context(),
            "package": package,
            "package_path": package.replace(".", "/"),
            "source_root": conventions.value("source-root", self.config.default_source_root),
            "test_root": conventions.value("test-root", self.config.default_test_root),
            "viewmodel_base": conventions.value("base-viewmodel", "ViewModel"),
        }

    # -- Rendering ---------------------------------------------------------

    def _render(
        self, template: Template, pattern: str, context: dict[str, Any], location: str
    ) -> str:
        return self.renderer.render_string(
            pattern, context, template_id=template.id, location=location
        )

    def _render_step(
        self,
        template: Template,
        step: ManualStep,
        context: dict[str, Any],
        conventions: Convention,
        index: int,
    ) -> str:
        text = self._render(template, step.text, context, f"manual step #{index}")
        if step.convention is None:
            return text
        if conventions.found(step.convention):
            return f"{text} (found at {conventions.value(step.convention)})"
        target = step.target or step.convention
        return (
            f"{text}. No {step.convention} was found: locate {target} "
            f"in the project and edit it manually"
        )


def generate(
    template_id: str,
    base_name: str,
    conventions: Optional[Convention] = None,
) -> GenerationResult:
    """Generate with the built-in registry and default configuration."""
    return Generator().generate(template_id, base_name, conventions)
