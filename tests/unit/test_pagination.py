"""Unit tests for Page."""
import pytest

from adminui_api.utils.pagination import Page


@pytest.mark.unit
class TestPage:
    """Tests for Page."""

    def test_paginate_first_page(self, items):
        page = Page.paginate(items, page=1, per_page=3, path="/items")

        assert [item["id"] for item in page.items] == [1, 2, 3]
        assert page.total == 7
        assert page.last_page == 3

    def test_paginate_middle_page(self, items):
        page = Page.paginate(items, page=2, per_page=3, path="/items")

        assert [item["id"] for item in page.items] == [4, 5, 6]
        assert page.first_item == 4
        assert page.last_item == 6

    def test_paginate_last_partial_page(self, items):
        page = Page.paginate(items, page=3, per_page=3, path="/items")

        assert [item["id"] for item in page.items] == [7]
        assert page.first_item == 7
        assert page.last_item == 7

    def test_page_below_one_is_clamped(self, items):
        page = Page.paginate(items, page=0, per_page=3)

        assert page.page == 1

    def test_per_page_is_clamped(self, items):
        page = Page.paginate(items, page=1, per_page=500, max_per_page=5)

        assert page.per_page == 5
        assert len(page.items) == 5

    def test_page_past_the_end(self, items):
        """Test that a page past the end is empty."""
        page = Page.paginate(items, page=9, per_page=3)

        assert page.items == []
        assert page.first_item is None
        assert page.last_item is None

    def test_empty_sequence(self):
        page = Page.paginate([], page=1, per_page=10, path="/items")

        assert page.last_page == 1
        assert page.meta() == {
            "current_page": 1,
            "from": None,
            "last_page": 1,
            "path": "/items",
            "per_page": 10,
            "to": None,
            "total": 0,
        }

    def test_links(self, items):
        page = Page.paginate(items, page=2, per_page=3, path="/items")

        assert page.links() == {
            "first": "/items?page=1",
            "last": "/items?page=3",
            "prev": "/items?page=1",
            "next": "/items?page=3",
        }

    def test_links_on_single_page(self, items):
        page = Page.paginate(items, page=1, per_page=10, path="/items")

        links = page.links()
        assert links["prev"] is None
        assert links["next"] is None

    def test_meta(self, items):
        page = Page.paginate(items, page=2, per_page=3, path="/items")

        assert page.meta() == {
            "current_page": 2,
            "from": 4,
            "last_page": 3,
            "path": "/items",
            "per_page": 3,
            "to": 6,
            "total": 7,
        }
