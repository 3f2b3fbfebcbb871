"""Unit tests for JsonResource and ResourceCollection."""
import pytest

from adminui_api.resources import JsonResource, ResourceCollection
from adminui_api.utils.pagination import Page
from adminui_api.utils.response import Result


@pytest.mark.unit
class TestJsonResource:
    """Tests for JsonResource."""

    def test_to_result(self, item_schema):
        resource = JsonResource({"id": 1, "name": "One", "secret": "s"}, item_schema)

        result = resource.to_result()

        assert isinstance(result, Result)
        assert result.data == {"id": 1, "name": "One"}
        assert result.links is None
        assert result.meta is None

    def test_schema_instance(self, item_schema):
        """Test that a schema instance works as well as a class."""
        resource = JsonResource({"id": 1, "name": "One"}, item_schema(only=("id",)))

        assert resource.to_result().data == {"id": 1}

    def test_object_resource(self, item_schema):
        """Test that plain objects are serialized through attributes."""

        class Item:
            id = 3
            name = "Three"

        assert JsonResource(Item(), item_schema).to_result().data == {"id": 3, "name": "Three"}

    def test_additional_meta(self, item_schema):
        resource = JsonResource({"id": 1}, item_schema).additional(source="cache")

        assert resource.to_result().meta == {"source": "cache"}

    def test_with_links(self, item_schema):
        resource = (
            JsonResource({"id": 1}, item_schema)
            .with_links({"self": "/items/1"})
            .with_links(parent="/items")
        )

        assert resource.to_result().links == {"self": "/items/1", "parent": "/items"}


@pytest.mark.unit
class TestResourceCollection:
    """Tests for ResourceCollection."""

    def test_plain_list(self, item_schema, items):
        collection = ResourceCollection(items, item_schema)

        result = collection.to_result()

        assert len(result.data) == 7
        assert result.data[0] == {"id": 1, "name": "Item 1"}
        assert result.links is None
        assert result.meta is None

    def test_generator(self, item_schema, items):
        """Test that any iterable can be used."""
        collection = ResourceCollection((item for item in items[:2]), item_schema)

        assert len(collection.to_result().data) == 2

    def test_paginated(self, item_schema, items):
        page = Page.paginate(items, page=3, per_page=3, path="/items")

        result = ResourceCollection(page, item_schema).to_result()

        assert result.data == [{"id": 7, "name": "Item 7"}]
        assert result.links["prev"] == "/items?page=2"
        assert result.links["next"] is None
        assert result.meta["current_page"] == 3
        assert result.meta["total"] == 7

    def test_paginated_with_extras(self, item_schema, items):
        """Test that extra links and meta are merged over the page values."""
        page = Page.paginate(items, page=1, per_page=3, path="/items")

        result = (
            ResourceCollection(page, item_schema)
            .additional(sort="name")
            .with_links({"self": "/items?page=1"})
            .to_result()
        )

        assert result.meta["sort"] == "name"
        assert result.meta["per_page"] == 3
        assert result.links["self"] == "/items?page=1"
        assert result.links["first"] == "/items?page=1"
