"""Tests for the template generator (droidgen.scaffolder.generator).

Covers:
- Entity / screen / api / tests template output
- Convention slots filled from probed values or defaults
- Manual-step annotation for found and missing conventions
- Error cases: unknown template, invalid name, unknown placeholder
- Idempotence and purity
"""

from __future__ import annotations

from pathlib import Path

import pytest

from droidgen.config import Config
from droidgen.errors import InvalidNameError, TemplateSubstitutionError, UnknownTemplateError
from droidgen.prober import Convention, ConventionProber
from droidgen.scaffolder.builtin import BUILTIN_TEMPLATES
from droidgen.scaffolder.generator import Generator, generate, known_placeholders
from droidgen.scaffolder.models import ManualStep, Template
from droidgen.scaffolder.registry import TemplateRegistry

pytestmark = pytest.mark.unit

DEFAULT_SRC = "app/src/main/java/com/example/app"


@pytest.fixture
def shop_conventions() -> Convention:
    return Convention(
        {
            "base-package": "com.acme.shop",
            "source-root": "app/src/main/kotlin",
            "test-root": "app/src/test/kotlin",
            "di-module-path": "app/src/main/kotlin/com/acme/shop/di/AppModule.kt",
            "database-path": "app/src/main/kotlin/com/acme/shop/data/local/ShopDatabase.kt",
            "navigation-path": "app/src/main/kotlin/com/acme/shop/ui/NavGraph.kt",
            "base-viewmodel": "BaseViewModel",
        }
    )


# ---------------------------------------------------------------------------
# entity
# ---------------------------------------------------------------------------


class TestEntityTemplate:
    def test_product_without_conventions(self, generator):
        result = generator.generate("entity", "Product")

        assert result.template_id == "entity"
        assert result.base_name == "Product"
        assert result.paths == [
            f"{DEFAULT_SRC}/data/local/entity/ProductEntity.kt",
            f"{DEFAULT_SRC}/data/local/dao/ProductDao.kt",
        ]
        entity_body = result.files[0].body
        assert '@Entity(tableName = "products")' in entity_body
        assert "data class ProductEntity(" in entity_body
        assert "package com.example.app.data.local.entity" in entity_body

        dao_body = result.files[1].body
        assert 'SELECT * FROM products WHERE id = :id' in dao_body
        assert "suspend fun upsert(product: ProductEntity): Long" in dao_body

    def test_register_in_database_step(self, generator):
        result = generator.generate("entity", "Product")
        database_steps = [s for s in result.manual_steps if "@Database" in s]
        assert len(database_steps) == 1
        step = database_steps[0]
        assert "Register ProductEntity in the @Database entities list" in step
        assert "No database-path was found" in step
        assert "RoomDatabase definition" in step

    def test_register_step_names_found_database(self, generator, shop_conventions):
        result = generator.generate("entity", "Product", shop_conventions)
        step = next(s for s in result.manual_steps if "@Database" in s)
        assert step.endswith(
            "(found at app/src/main/kotlin/com/acme/shop/data/local/ShopDatabase.kt)"
        )

    def test_multi_word_name(self, generator):
        result = generator.generate("entity", "OrderItem")
        assert '@Entity(tableName = "order_items")' in result.files[0].body
        assert "fun delete(orderItem: OrderItemEntity)" in result.files[1].body


# ---------------------------------------------------------------------------
# screen / api / tests
# ---------------------------------------------------------------------------


class TestScreenTemplate:
    def test_files(self, generator):
        result = generator.generate("screen", "Checkout")
        assert result.paths == [
            f"{DEFAULT_SRC}/ui/checkout/CheckoutUiState.kt",
            f"{DEFAULT_SRC}/ui/checkout/CheckoutViewModel.kt",
            f"{DEFAULT_SRC}/ui/checkout/CheckoutScreen.kt",
        ]
        screen_body = result.files[2].body
        assert "fun CheckoutScreen(" in screen_body
        assert 'const val CHECKOUT_ROUTE = "checkout"' in screen_body

    def test_default_viewmodel_base(self, generator):
        body = generator.generate("screen", "Checkout").files[1].body
        assert "class CheckoutViewModel @Inject constructor() : ViewModel() {" in body

    def test_probed_conventions_used(self, generator, shop_conventions):
        result = generator.generate("screen", "OrderHistory", shop_conventions)
        assert result.paths[0] == (
            "app/src/main/kotlin/com/acme/shop/ui/orderhistory/OrderHistoryUiState.kt"
        )
        vm_body = result.files[1].body
        assert "package com.acme.shop.ui.orderhistory" in vm_body
        assert ": BaseViewModel() {" in vm_body
        assert 'const val ORDER_HISTORY_ROUTE = "order_history"' in result.files[2].body

    def test_manual_steps(self, generator):
        steps = generator.generate("screen", "Checkout").manual_steps
        assert steps[0].startswith("Register the CheckoutScreen route in the navigation graph")
        assert "No navigation-path was found" in steps[0]
        assert steps[1] == "Add string resources for CheckoutScreen to res/values/strings.xml"


class TestApiTemplate:
    def test_routes_use_plural(self, generator):
        result = generator.generate("api", "Category")
        service = next(f for f in result.files if f.path.endswith("CategoryApiService.kt"))
        assert '@GET("categories")' in service.body
        assert '@GET("categories/{id}")' in service.body
        assert "suspend fun getCategoryList(): List<CategoryDto>" in service.body

    def test_di_step_found(self, generator, shop_conventions):
        steps = generator.generate("api", "Category", shop_conventions).manual_steps
        assert steps[0] == (
            "Provide CategoryApiService from the Retrofit instance in the DI module "
            "(found at app/src/main/kotlin/com/acme/shop/di/AppModule.kt)"
        )


class TestTestsTemplate:
    def test_uses_test_root(self, generator, shop_conventions):
        result = generator.generate("tests", "Product", shop_conventions)
        assert result.paths == [
            "app/src/test/kotlin/com/acme/shop/ui/product/ProductViewModelTest.kt",
            "app/src/test/kotlin/com/acme/shop/data/repository/ProductRepositoryTest.kt",
        ]
        assert "class ProductRepositoryTest {" in result.files[1].body


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_empty_name(self, generator):
        with pytest.raises(InvalidNameError) as exc_info:
            generator.generate("screen", "")
        assert exc_info.value.name == ""

    def test_invalid_name(self, generator):
        with pytest.raises(InvalidNameError):
            generator.generate("screen", "order item")

    def test_unknown_template(self, generator):
        with pytest.raises(UnknownTemplateError) as exc_info:
            generator.generate("unknown-template", "Product")
        assert exc_info.value.known_ids == ["screen", "api", "entity", "tests"]
        message = str(exc_info.value)
        for template_id in ("screen", "api", "entity", "tests"):
            assert template_id in message

    def test_unknown_placeholder_fails_fast(self, broken_registry):
        generator = Generator(registry=broken_registry)
        with pytest.raises(TemplateSubstitutionError) as exc_info:
            generator.generate("broken", "Product")
        err = exc_info.value
        assert err.placeholder == "name_kebab"
        assert err.location == "body of file #2"
        assert "name_kebab" in str(err)

    def test_unknown_placeholder_in_manual_step(self):
        template = Template(id="steps", manual_steps=(ManualStep(text="Edit {{ module }}"),))
        generator = Generator(registry=TemplateRegistry([template]))
        with pytest.raises(TemplateSubstitutionError) as exc_info:
            generator.generate("steps", "Product")
        assert exc_info.value.placeholder == "module"
        assert exc_info.value.location == "manual step #1"

    def test_unknown_convention_key_in_manual_step(self):
        template = Template(
            id="steps",
            manual_steps=(ManualStep(text="Edit it", convention="gradle-path"),),
        )
        generator = Generator(registry=TemplateRegistry([template]))
        with pytest.raises(TemplateSubstitutionError) as exc_info:
            generator.generate("steps", "Product")
        assert exc_info.value.placeholder == "gradle-path"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("template", BUILTIN_TEMPLATES, ids=lambda t: t.id)
    def test_builtins_only_use_known_placeholders(self, generator, template):
        generator.check_placeholders(template)

    @pytest.mark.parametrize("template_id", ["screen", "api", "entity", "tests"])
    @pytest.mark.parametrize("name", ["Product", "order_item", "X", "Category2"])
    def test_builtins_render_without_raw_placeholders(self, generator, template_id, name):
        result = generator.generate(template_id, name)
        for generated in result.files:
            assert "{{" not in generated.path
            assert "{{" not in generated.body
        for step in result.manual_steps:
            assert "{{" not in step

    @pytest.mark.parametrize("template_id", ["screen", "api", "entity", "tests"])
    def test_idempotent(self, generator, shop_conventions, template_id):
        first = generator.generate(template_id, "Product", shop_conventions)
        second = generator.generate(template_id, "Product", shop_conventions)
        assert first == second
        assert [f.body.encode() for f in first.files] == [f.body.encode() for f in second.files]

    def test_independent_generators_agree(self, shop_conventions):
        assert Generator().generate("api", "Product", shop_conventions) == Generator().generate(
            "api", "Product", shop_conventions
        )

    def test_generation_writes_nothing(self, generator, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        generator.generate("entity", "Product")
        assert list(tmp_path.iterdir()) == []

    def test_known_placeholders(self):
        assert {"name", "name_plural", "package", "source_root"} <= known_placeholders()


class TestProbeThenGenerate:
    def test_nonexistent_root_falls_back_to_defaults(self, tmp_path: Path):
        conventions = ConventionProber().probe(tmp_path / "missing")
        result = Generator().generate("entity", "Product", conventions)
        assert result.paths[0] == f"{DEFAULT_SRC}/data/local/entity/ProductEntity.kt"

    def test_custom_config_defaults(self):
        config = Config(default_package="io.acme", default_source_root="src")
        result = Generator(config=config).generate("entity", "Product")
        assert result.paths[0] == "src/io/acme/data/local/entity/ProductEntity.kt"

    def test_module_level_generate(self):
        result = generate("entity", "Product")
        assert '@Entity(tableName = "products")' in result.files[0].body
