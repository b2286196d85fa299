"""
Testes do Resource.

Cobre:
- Naming (underscored, camelized, display, tabela)
- Controller name e rotas
- Menu (label, parent, priority, display_if, include_in_menu)
- Page configs, sort order, scopes, CSV builder
"""

import pytest
from pydantic import ValidationError

from resource_admin.exceptions import AdminConfigurationError, AdminRegistrationError
from resource_admin.exports import CSVBuilder, content_columns
from resource_admin.resource import Resource
from resource_admin.scopes import Scope
from tests.models import Category, Mock, Post


# =========================================================================
# Naming
# =========================================================================

class TestNaming:

    def test_underscored_resource_name(self, config):
        assert config.underscored_resource_name == "category"

    def test_underscored_name_of_nested_class(self, namespace):
        resource = Resource(namespace, Mock.Resource)
        assert resource.underscored_resource_name == "mock_resource"

    def test_underscored_name_with_as_option(self, namespace):
        resource = Resource(namespace, Category, {"as": "Blog Categories"})
        assert resource.underscored_resource_name == "blog_category"

    def test_camelized_resource_name(self, namespace):
        resource = Resource(namespace, Category, {"as_": "Blog Categories"})
        assert resource.camelized_resource_name == "BlogCategory"

    def test_resource_name(self, config):
        assert config.resource_name == "Category"

    def test_plural_resource_name(self, config):
        assert config.plural_resource_name == "Categories"

    def test_resource_name_with_as_option(self, namespace):
        resource = Resource(namespace, Category, {"as": "My Category"})
        assert resource.resource_name == "My Category"
        assert resource.plural_resource_name == "My Categories"

    def test_resource_table_name(self, config):
        assert config.resource_table_name == '"categories"'

    def test_resource_table_name_ignores_as_option(self, namespace):
        resource = Resource(namespace, Category, {"as": "My Category"})
        assert resource.resource_table_name == '"categories"'

    def test_namespace(self, config, namespace):
        assert config.namespace is namespace

    def test_unknown_option_is_rejected(self, namespace):
        with pytest.raises(AdminRegistrationError):
            Resource(namespace, Category, {"label": "Nope"})

    @pytest.mark.parametrize("label", ["", "   ", "!!!", "_"])
    def test_blank_as_option_is_rejected(self, namespace, label):
        with pytest.raises(AdminRegistrationError):
            Resource(namespace, Category, {"as": label})

    def test_as_option_is_stripped(self, namespace):
        resource = Resource(namespace, Category, {"as": "  Blog Categories "})
        assert resource.resource_name == "Blog Categories"
        assert resource.underscored_resource_name == "blog_category"

    def test_options_are_immutable(self, config):
        with pytest.raises(ValidationError):
            config.options.sort_order = "name_asc"

    def test_entity_without_table(self, namespace):
        class Plain:
            pass

        resource = Resource(namespace, Plain)
        assert resource.underscored_resource_name == "plain"
        with pytest.raises(AdminConfigurationError):
            resource.resource_table_name


# =========================================================================
# Controller e rotas
# =========================================================================

class TestRoutes:

    def test_namespaced_controller_name(self, config):
        assert config.controller_name == "Admin::CategoriesController"

    def test_root_controller_name(self, root_namespace):
        resource = Resource(root_namespace, Category)
        assert resource.controller_name == "CategoriesController"

    def test_route_prefix(self, application):
        resource = application.register(Category)
        assert resource.route_prefix == "admin"

    def test_route_collection_path(self, application):
        resource = application.register(Category)
        assert resource.route_collection_path == "admin_categories_path"

    def test_route_instance_path(self, application):
        resource = application.register(Category)
        assert resource.route_instance_path == "admin_category_path"

    def test_no_namespace_has_no_route_prefix(self, application):
        resource = application.register(Category, namespace=False)
        assert resource.route_prefix is None
        assert resource.route_collection_path == "categories_path"
        assert resource.controller_name == "CategoriesController"

    def test_namespace_false_on_named_namespace(self, namespace):
        resource = namespace.register(Category, namespace=False)
        assert resource.route_prefix is None
        assert resource.controller_name == "CategoriesController"
        assert resource.route_collection_path == "categories_path"

    def test_namespace_false_on_resource(self, namespace):
        resource = Resource(namespace, Category, {"namespace": False})
        assert resource.route_prefix is None
        assert resource.route_instance_path == "category_path"

    def test_action_paths(self, application):
        resource = application.register(Post)
        publish = resource.member_action("publish", method="put")
        archive = resource.collection_action("archive_all", method="post")

        assert resource.route_action_path(publish) == "publish_admin_post_path"
        assert resource.route_action_path(archive) == "archive_all_admin_posts_path"
        assert publish.method == "PUT"
        assert resource.member_actions == [publish]
        assert resource.collection_actions == [archive]

    def test_generated_controller_class(self, config):
        controller_class = config.controller
        assert controller_class.__name__ == "CategoriesController"
        assert controller_class.resource_config is config
        assert config.controller is controller_class


# =========================================================================
# Menu
# =========================================================================

class TestMenu:

    def test_regular_resource_in_menu(self, namespace):
        resource = namespace.register(Post)
        assert resource.include_in_menu() is True

    def test_belongs_to_not_in_menu(self, namespace):
        resource = namespace.register(Post, lambda c: c.belongs_to("user"))
        assert resource.include_in_menu() is False

    def test_optional_belongs_to_in_menu(self, namespace):
        resource = namespace.register(Post, lambda c: c.belongs_to("user", optional=True))
        assert resource.include_in_menu() is True

    def test_menu_false_not_in_menu(self, namespace):
        resource = namespace.register(Post, lambda c: c.menu(False))
        assert resource.include_in_menu() is False

    def test_menu_item_name_default(self, config):
        assert config.menu_item_name == "Categories"

    def test_menu_item_name_settable(self, config):
        config.menu(label="My Label")
        assert config.menu_item_name == "My Label"

    def test_parent_menu_item_name(self, config):
        assert config.parent_menu_item_name is None
        config.menu(parent="Blog")
        assert config.parent_menu_item_name == "Blog"

    def test_menu_item_priority(self, config):
        assert config.menu_item_priority == 10
        config.menu(priority=2)
        assert config.menu_item_priority == 2

    def test_menu_item_priority_must_be_int(self, config):
        with pytest.raises(TypeError):
            config.menu(priority="high")

    def test_menu_item_display_if_default(self, config):
        assert callable(config.menu_item_display_if)
        assert config.menu_item_display_if() is True

    def test_menu_item_display_if_settable(self, config):
        config.menu(if_=lambda: False)
        assert config.menu_item_display_if() is False

    def test_menu_options_merge(self, config):
        config.menu(label="Cats")
        config.menu(priority=3)
        assert config.menu_item_name == "Cats"
        assert config.menu_item_priority == 3


# =========================================================================
# Page configs, sort order, scopes
# =========================================================================

class TestPageConfigs:

    def test_empty_when_initialized(self, config):
        assert config.page_configs == {}

    def test_settable(self, config):
        config.page_configs["index"] = "hello world"
        assert config.page_configs["index"] == "hello world"


class TestSortOrder:

    def test_default(self, config, application):
        assert config.sort_order == application.default_sort_order == "id_desc"

    def test_explicit(self, namespace):
        resource = Resource(namespace, Category, {"sort_order": "name_desc"})
        assert resource.sort_order == "name_desc"


class TestScopes:

    def test_add_scope(self, config):
        config.scope("published")
        assert isinstance(config.scopes[0], Scope)
        assert config.scopes[0].name == "Published"

    def test_get_scope_by_id(self, config):
        config.scope("published")
        assert config.get_scope_by_id("published").name == "Published"

    def test_get_scope_by_id_missing(self, config):
        assert config.get_scope_by_id("draft") is None

    def test_insertion_order(self, config):
        config.scope("published")
        config.scope("draft", name="Rascunhos")
        assert [s.id for s in config.scopes] == ["published", "draft"]
        assert config.scopes[1].name == "Rascunhos"

    def test_redeclared_scope_replaces_in_place(self, config):
        config.scope("published")
        config.scope("draft")
        config.scope("published", name="Live")
        assert [s.name for s in config.scopes] == ["Live", "Draft"]

    def test_default_scope(self, config):
        assert config.default_scope is None
        config.scope("all")
        config.scope("published", default=True)
        assert config.default_scope.id == "published"


# =========================================================================
# CSV
# =========================================================================

class TestCSVBuilder:

    def test_default_builder(self, config):
        builder = config.csv_builder
        assert len(builder.columns) == len(content_columns(Category)) + 1
        assert [c.name for c in builder.columns] == ["id", "name", "description"]

    def test_default_builder_skips_foreign_keys(self, namespace):
        resource = Resource(namespace, Post)
        assert [c.name for c in resource.csv_builder.columns] == ["id", "title", "body"]

    def test_default_builder_is_memoized(self, config):
        assert config.csv_builder is config.csv_builder

    def test_set_builder(self, config):
        builder = CSVBuilder()
        config.csv_builder = builder
        assert config.csv_builder is builder
