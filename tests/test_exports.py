"""
Testes do CSV builder.
"""

from types import SimpleNamespace

from resource_admin.exports import CSVBuilder, content_columns, primary_key_name
from tests.models import Category, Post


class TestContentColumns:

    def test_excludes_primary_and_foreign_keys(self):
        assert [c.name for c in content_columns(Post)] == ["title", "body"]

    def test_entity_without_table(self):
        assert content_columns(object) == []

    def test_primary_key_name(self):
        assert primary_key_name(Category) == "id"
        assert primary_key_name(object) == "id"


class TestCSVBuilder:

    def test_default_for_resource(self):
        builder = CSVBuilder.default_for_resource(Category)
        assert [c.name for c in builder.columns] == ["id", "name", "description"]

    def test_header_and_row(self):
        builder = CSVBuilder()
        builder.column("title")
        builder.column("shout", lambda post: post.title.upper())
        post = SimpleNamespace(title="hello")

        assert builder.header() == ["Title", "Shout"]
        assert builder.row(post) == ["hello", "HELLO"]

    def test_dsl_replaces_default(self, namespace):
        def setup(config):
            config.csv(lambda csv: csv.column("title"))

        resource = namespace.register(Post, setup)
        assert [c.name for c in resource.csv_builder.columns] == ["title"]
