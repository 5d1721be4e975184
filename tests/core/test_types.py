"""Tests for the Post model and PostCollection."""

from datetime import date

import pytest
from pydantic import ValidationError

from blogcorpus.core.types import Post, PostCollection


def _post(title: str, day: date, **kwargs) -> Post:
    return Post(title=title, date=day, **kwargs)


class TestPost:
    def test_tags_keep_their_order(self):
        post = _post("T", date(2023, 1, 1), tags=["terraform", "cloud build"])
        assert post.tags == ["terraform", "cloud build"]

    def test_single_tag_string_becomes_a_list(self):
        assert _post("T", date(2023, 1, 1), tags="terraform").tags == ["terraform"]

    def test_duplicate_and_blank_tags_are_dropped(self):
        post = _post("T", date(2023, 1, 1), tags=["gcp", " terraform ", "gcp", ""])
        assert post.tags == ["gcp", "terraform"]

    def test_mapping_tags_are_rejected(self):
        with pytest.raises(ValidationError):
            _post("T", date(2023, 1, 1), tags={"terraform": 1})

    def test_title_is_stripped(self):
        assert _post("  Inline builds  ", date(2023, 1, 1)).title == "Inline builds"

    def test_blank_author_becomes_none(self):
        assert _post("T", date(2023, 1, 1), author="  ").author is None

    def test_date_string_is_coerced(self):
        assert Post(title="T", date="2023-10-26").date == date(2023, 10, 26)

    def test_is_frozen(self):
        post = _post("T", date(2023, 1, 1))
        with pytest.raises(ValidationError):
            post.title = "Changed"

    def test_slug_from_title(self):
        post = _post("Cloud Build triggers with Terraform!", date(2023, 1, 1))
        assert post.slug == "cloud-build-triggers-with-terraform"

    def test_slug_from_extra(self):
        post = _post("Whatever", date(2023, 1, 1), extra={"slug": "inline-builds"})
        assert post.slug == "inline-builds"

    def test_explicit_slug_is_slugified(self):
        post = _post("Whatever", date(2023, 1, 1), extra={"slug": "../Escaped Path"})
        assert post.slug == "escaped-path"

    def test_to_frontmatter_orders_keys(self):
        post = _post(
            "T",
            date(2023, 1, 1),
            subtitle="S",
            author="A",
            tags=["x"],
            extra={"layout": "post"},
        )
        assert list(post.to_frontmatter()) == ["title", "subtitle", "date", "author", "tags", "layout"]


class TestPostCollection:
    @pytest.fixture
    def collection(self) -> PostCollection:
        return PostCollection.from_posts(
            [
                _post("Old", date(2022, 5, 1), author="Ann", tags=["gcp"]),
                _post("beta", date(2023, 3, 1), author="Bob", tags=["terraform", "cloud build"]),
                _post("Alpha", date(2023, 3, 1), author="Ann", tags=["terraform"]),
            ]
        )

    def test_newest_first_with_title_tiebreak(self, collection):
        assert [post.title for post in collection] == ["Alpha", "beta", "Old"]

    def test_len(self, collection):
        assert len(collection) == 3
        assert len(PostCollection()) == 0

    def test_tags_counted_in_order_of_first_appearance(self, collection):
        assert collection.tags() == {"terraform": 2, "cloud build": 1, "gcp": 1}

    def test_with_tag(self, collection):
        assert [post.title for post in collection.with_tag("terraform")] == ["Alpha", "beta"]
        assert collection.with_tag("missing") == []

    def test_by_author(self, collection):
        assert [post.title for post in collection.by_author("Ann")] == ["Alpha", "Old"]

    def test_get_by_slug(self, collection):
        assert collection.get("beta").title == "beta"
        assert collection.get("nope") is None
