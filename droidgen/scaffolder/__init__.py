"""droidgen scaffolder -- applies named Android templates to a base name.

Quick usage::

    from droidgen.scaffolder import Generator
    from droidgen.prober import ConventionProber

    conventions = ConventionProber().probe("/path/to/android-project")
    result = Generator().generate("entity", "Product", conventions)
    for generated in result.files:
        print(generated.path)
    print(result.manual_steps)
"""

from droidgen.scaffolder.generator import Generator, generate
from droidgen.scaffolder.models import (
    FileSkeleton,
    GeneratedFile,
    GenerationResult,
    ManualStep,
    Template,
)
from droidgen.scaffolder.registry import TemplateRegistry, default_registry
from droidgen.scaffolder.templates import TemplateRenderer
from droidgen.scaffolder.writer import write_result

__all__ = [
    "FileSkeleton",
    "GeneratedFile",
    "GenerationResult",
    "Generator",
    "ManualStep",
    "Template",
    "TemplateRegistry",
    "TemplateRenderer",
    "default_registry",
    "generate",
    "write_result",
]
