"""droidgen command-line interface.

Usage::

    droidgen generate entity Product --project-root ./my-app
    droidgen generate screen Checkout --project-root ./my-app --write
    droidgen templates
    droidgen probe --project-root ./my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from droidgen.config import Config
from droidgen.errors import ConfigError, DroidgenError
from droidgen.prober import ConventionProber
from droidgen.scaffolder.generator import Generator
from droidgen.scaffolder.registry import default_registry
from droidgen.scaffolder.writer import write_result
from droidgen.utils import console, print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="droidgen",
        description="droidgen -- Android code scaffolding from named templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  droidgen generate entity Product --project-root ./my-app\n"
            "  droidgen generate screen Checkout --write\n"
            "  droidgen probe --project-root ./my-app\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read DROIDGEN_* environment variables)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Render a template for a base name")
    gen.add_argument("template", help="Template id, e.g. 'entity'")
    gen.add_argument("name", help="Base name, e.g. 'Product'")
    gen.add_argument(
        "--project-root",
        default=".",
        help="Android project to probe for conventions (default: current directory)",
    )
    gen.add_argument(
        "--write",
        action="store_true",
        help="Write the generated files under the project root",
    )
    gen.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing files when writing",
    )
    gen.add_argument(
        "--show-body",
        action="store_true",
        help="Print the generated file bodies",
    )

    subparsers.add_parser("templates", help="List the registered templates")

    probe = subparsers.add_parser("probe", help="Show the conventions discovered in a project")
    probe.add_argument(
        "--project-root",
        default=".",
        help="Android project to probe (default: current directory)",
    )
    return parser


def _load_config(path: Optional[str]) -> Config:
    """Load the ``--config`` file, or the ``DROIDGEN_*`` environment."""
    source = path or "DROIDGEN_* environment variables"
    try:
        if path:
            return Config.load(Path(path))
        return Config.from_env()
    except OSError as exc:
        raise ConfigError(source, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError; so is int("abc").
        raise ConfigError(source, str(exc)) from exc


def _cmd_generate(args: argparse.Namespace, config: Config) -> int:
    conventions = ConventionProber(config.probe).probe(args.project_root)
    generator = Generator(config=config)
    result = generator.generate(args.template, args.name, conventions)

    for generated in result.files:
        console.print(generated.path, markup=False, emoji=False, highlight=False, soft_wrap=True)
        if args.show_body:
            console.print(
                generated.body, markup=False, emoji=False, highlight=False, soft_wrap=True
            )

    if result.manual_steps:
        console.print()
        console.print("Manual steps:", markup=False, emoji=False, highlight=False)
        for index, step in enumerate(result.manual_steps, start=1):
            console.print(
                f"  {index}. {step}", markup=False, emoji=False, highlight=False, soft_wrap=True
            )

    if args.write:
        written = asyncio.run(
            write_result(result, args.project_root, overwrite=args.force)
        )
        print_success(f"Wrote {len(written)} file(s) under {args.project_root}")
    return 0


def _cmd_templates() -> int:
    registry = default_registry()
    print_summary_table(
        {template.id: template.description for template in registry},
        title="Templates",
    )
    return 0


def _cmd_probe(args: argparse.Namespace, config: Config) -> int:
    conventions = ConventionProber(config.probe).probe(args.project_root)
    print_summary_table(conventions.as_dict(), title=f"Conventions: {args.project_root}")
    if len(conventions.missing()) == len(conventions):
        print_warning("No conventions found; templates will use the configured defaults")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``droidgen`` and ``python -m droidgen.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args.config)
        if args.command == "generate":
            return _cmd_generate(args, config)
        if args.command == "templates":
            return _cmd_templates()
        return _cmd_probe(args, config)
    except DroidgenError as exc:
        print_error(f"{exc.kind}: {exc}")
        return 1
    except OSError as exc:
        print_error(f"{type(exc).__name__}: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
