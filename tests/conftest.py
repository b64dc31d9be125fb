"""Shared pytest fixtures for the droidgen test suite.

Provides reusable fixtures for:
- Fake Android project trees on disk
- A config with a tight file-count bound
- Ready-made registries and generators
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from droidgen.config import Config, ProbeConfig
from droidgen.scaffolder.generator import Generator
from droidgen.scaffolder.models import FileSkeleton, ManualStep, Template
from droidgen.scaffolder.registry import TemplateRegistry


def _write(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Fake Android projects
# ---------------------------------------------------------------------------


@pytest.fixture
def android_project(tmp_path: Path) -> Path:
    """A small Kotlin Android project using Hilt, Room and Compose navigation."""
    root = tmp_path / "shop-app"
    _write(root, "settings.gradle.kts", 'include(":app")\n')
    _write(
        root,
        "app/build.gradle.kts",
        """\
        android {
            namespace = "com.acme.shop"
            defaultConfig {
                applicationId = "com.acme.shop.app"
            }
        }
        """,
    )
    _write(root, "app/src/main/AndroidManifest.xml", "<manifest />\n")
    src = "app/src/main/java/com/acme/shop"
    _write(root, f"{src}/di/NetworkModule.kt", "object NetworkModule\n")
    _write(root, f"{src}/data/local/AppDatabase.kt", "abstract class AppDatabase\n")
    _write(root, f"{src}/ui/navigation/AppNavHost.kt", "fun AppNavHost() {}\n")
    _write(
        root,
        f"{src}/ui/BaseViewModel.kt",
        """\
        package com.acme.shop.ui

        abstract class BaseViewModel : ViewModel()
        """,
    )
    _write(root, "app/src/test/java/com/acme/shop/ExampleTest.kt", "class ExampleTest\n")
    yield root


@pytest.fixture
def manifest_project(tmp_path: Path) -> Path:
    """A legacy project that declares its package only in the manifest."""
    root = tmp_path / "legacy-app"
    _write(
        root,
        "app/src/main/AndroidManifest.xml",
        """\
        <?xml version="1.0" encoding="utf-8"?>
        <manifest xmlns:android="http://schemas.android.com/apk/res/android"
            package="org.legacy.notes">
        </manifest>
        """,
    )
    _write(root, "app/src/main/kotlin/org/legacy/notes/MainActivity.kt", "class MainActivity\n")
    yield root


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    root = tmp_path / "empty"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Config / registry / generator
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> Config:
    return Config(probe=ProbeConfig(max_files=500))


@pytest.fixture
def generator(config: Config) -> Generator:
    return Generator(config=config)


@pytest.fixture
def broken_template() -> Template:
    """A template whose body references a placeholder that does not exist."""
    return Template(
        id="broken",
        files=(
            FileSkeleton(path="{{ name_pascal }}.kt", body="class {{ name_pascal }}\n"),
            FileSkeleton(path="{{ name_pascal }}Extra.kt", body="val x = {{ name_kebab }}\n"),
        ),
        manual_steps=(ManualStep(text="Nothing to do for {{ name }}"),),
    )


@pytest.fixture
def broken_registry(broken_template: Template) -> TemplateRegistry:
    return TemplateRegistry([broken_template])
