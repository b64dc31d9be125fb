"""Template registry.

Holds the named templates available to the generator. The process-wide
registry returned by :func:`default_registry` is populated once from
:mod:`droidgen.scaffolder.builtin` and frozen, after which it is read-only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

from droidgen.errors import DuplicateTemplateError, RegistryFrozenError, UnknownTemplateError
from droidgen.scaffolder.models import Template


class TemplateRegistry:
    """Mapping of template id -> :class:`Template`, in registration order."""

    def __init__(self, templates: Iterable[Template] = ()) -> None:
        self._templates: dict[str, Template] = {}
        self._frozen = False
        for template in templates:
            self.register(template)

    def register(self, template: Template) -> Template:
        """Add *template* to the registry.

        Raises:
            DuplicateTemplateError: If the id is already registered.
            RegistryFrozenError: If :meth:`freeze` has been called.
        """
        if self._frozen:
            raise RegistryFrozenError(template.id)
        if template.id in self._templates:
            raise DuplicateTemplateError(template.id)
        self._templates[template.id] = template
        return template

    def lookup(self, template_id: str) -> Template:
        """Return the template registered under *template_id*.

        Raises:
            UnknownTemplateError: If no such template exists; the error lists
                the known ids.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id, self.ids()) from None

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def ids(self) -> list[str]:
        """Registered ids in registration order."""
        return list(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(list(self._templates.values()))

    def __len__(self) -> int:
        return len(self._templates)


@lru_cache(maxsize=1)
def default_registry() -> TemplateRegistry:
    """Return the process-wide registry of built-in templates."""
    from droidgen.scaffolder.builtin import BUILTIN_TEMPLATES

    registry = TemplateRegistry(BUILTIN_TEMPLATES)
    registry.freeze()
    return registry
