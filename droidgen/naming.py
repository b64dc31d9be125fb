"""Naming helpers and the ``NamingForms`` value.

A single base name such as ``"OrderItem"`` is expanded into the case variants
the Kotlin templates need: class names, property names, file/package segments
and Room table / route names.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from droidgen.errors import InvalidNameError

NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*$"
_NAME_RE = re.compile(NAME_PATTERN)


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def to_snake(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    s3 = re.sub(r"[-\s]+", "_", s2).lower()
    return re.sub(r"_+", "_", s3).strip("_")


def to_pascal(value: str) -> str:
    """Convert ``some_thing`` or ``someThing`` to ``SomeThing``.

    Words that already carry inner capitals keep them, so ``"orderItem"``
    becomes ``"OrderItem"`` rather than ``"Orderitem"``.
    """
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[0].upper() + word[1:] for word in parts if word)


def to_camel(value: str) -> str:
    """Convert ``some_thing`` or ``SomeThing`` to ``someThing``."""
    pascal = to_pascal(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


_IRREGULAR_PLURALS = {
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "knife": "knives",
    "leaf": "leaves",
    "life": "lives",
    "man": "men",
    "mouse": "mice",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

# Nouns whose plural is the word itself.
_UNCOUNTABLE = frozenset(
    {
        "data", "equipment", "feedback", "info", "information", "media",
        "metadata", "news", "series", "sheep", "species", "staff",
    }
)


def pluralize(word: str) -> str:
    """Return the English plural of a lowercase word.

    Common irregular and uncountable nouns come from a fixed table; everything
    else follows the regular suffix rules.

    Examples::

        pluralize("product")  -> "products"
        pluralize("category") -> "categories"
        pluralize("address")  -> "addresses"
        pluralize("quiz")     -> "quizzes"
        pluralize("person")   -> "people"
        pluralize("news")     -> "news"
    """
    if not word:
        return word
    if word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[word]
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return word[:-1] + "ies"
    # quiz -> quizzes, but buzz -> buzzes
    if word.endswith("z") and len(word) > 1 and word[-2] in "aeiou":
        return word + "zes"
    if word.endswith(("s", "sh", "ch", "x", "z")):
        return word + "es"
    return word + "s"


def plural_snake(value: str) -> str:
    """Pluralize the last word of the snake-cased name.

    ``"OrderItem"`` -> ``"order_items"``.
    """
    snake = to_snake(value)
    head, _, last = snake.rpartition("_")
    plural = pluralize(last)
    return f"{head}_{plural}" if head else plural


# ---------------------------------------------------------------------------
# NamingForms
# ---------------------------------------------------------------------------


class NamingForms(BaseModel):
    """Case variants derived from one base name.

    Computed per generation request by :func:`derive_naming_forms`; the model
    is frozen so templates can never mutate it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    name_pascal: str
    name_camel: str
    name_snake: str
    name_lower: str
    name_plural: str

    @classmethod
    def placeholder_names(cls) -> frozenset[str]:
        """Placeholder names provided by every ``NamingForms`` instance."""
        return frozenset(cls.model_fields)

    def as_context(self) -> dict[str, str]:
        """Return the forms as a plain ``{placeholder: value}`` mapping."""
        return self.model_dump()


def validate_name(base_name: str) -> str:
    """Return *base_name* unchanged or raise :class:`InvalidNameError`."""
    if not isinstance(base_name, str) or not _NAME_RE.match(base_name):
        raise InvalidNameError(str(base_name), NAME_PATTERN)
    return base_name


def derive_naming_forms(base_name: str) -> NamingForms:
    """Validate *base_name* and compute its :class:`NamingForms`.

    Examples::

        derive_naming_forms("Product").name_plural     -> "products"
        derive_naming_forms("order_item").name_pascal  -> "OrderItem"
    """
    validate_name(base_name)
    snake = to_snake(base_name)
    return NamingForms(
        name=base_name,
        name_pascal=to_pascal(snake),
        name_camel=to_camel(snake),
        name_snake=snake,
        name_lower=snake.replace("_", ""),
        name_plural=plural_snake(base_name),
    )
