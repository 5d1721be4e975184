"""Core Data Types for blogcorpus."""

import datetime
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogcorpus.core.dates import coerce_date
from blogcorpus.core.utils import slugify

# Front matter keys that map onto Post fields; everything else lands in ``extra``.
POST_FIELDS = ("title", "subtitle", "date", "author", "tags")


class Post(BaseModel):
    """A blog post: front matter fields plus its Markdown body.

    Posts are written by hand and never mutated once loaded.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str | None = None
    date: datetime.date
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    body: str = ""
    extra: dict[str, Any] = Field(default_factory=dict)
    source_path: Path | None = Field(default=None, exclude=True)

    @field_validator("title", "subtitle", "author", mode="before")
    @classmethod
    def _numbers_to_text(cls, value: Any) -> Any:
        # YAML reads `title: 1984` as an int
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("title")
    @classmethod
    def _title_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "title must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("subtitle", "author")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> datetime.date:
        return coerce_date(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list | tuple):
            msg = f"tags must be a list of strings, got {type(value).__name__}"
            raise ValueError(msg)

        tags: list[str] = []
        for tag in value:
            if not isinstance(tag, str | int | float):
                msg = f"tag must be a string, got {type(tag).__name__}"
                raise ValueError(msg)
            text = str(tag).strip()
            if text and text not in tags:
                tags.append(text)
        return tags

    @property
    def slug(self) -> str:
        explicit = self.extra.get("slug")
        if isinstance(explicit, str) and explicit.strip():
            return slugify(explicit)
        return slugify(self.title)

    @classmethod
    def from_frontmatter(
        cls, metadata: dict[str, Any], body: str, *, source_path: Path | None = None
    ) -> "Post":
        """Build a post from a parsed front matter mapping and its body."""
        known = {key: metadata[key] for key in POST_FIELDS if key in metadata}
        extra = {key: value for key, value in metadata.items() if key not in POST_FIELDS}
        return cls(**known, body=body, extra=extra, source_path=source_path)

    def to_frontmatter(self) -> dict[str, Any]:
        """Metadata mapping in the conventional key order, without the body."""
        metadata: dict[str, Any] = {"title": self.title}
        if self.subtitle is not None:
            metadata["subtitle"] = self.subtitle
        metadata["date"] = self.date
        if self.author is not None:
            metadata["author"] = self.author
        if self.tags:
            metadata["tags"] = list(self.tags)
        metadata.update(self.extra)
        return metadata


@dataclass(frozen=True, slots=True)
class PostCollection:
    """Posts ordered newest first, ties broken by title."""

    posts: tuple[Post, ...] = field(default_factory=tuple)

    @classmethod
    def from_posts(cls, posts: list[Post]) -> "PostCollection":
        ordered = sorted(posts, key=lambda p: p.title.casefold())
        ordered.sort(key=lambda p: p.date, reverse=True)
        return cls(posts=tuple(ordered))

    def __len__(self) -> int:
        return len(self.posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    def tags(self) -> dict[str, int]:
        """Tag -> number of posts, in order of first appearance."""
        counts: dict[str, int] = {}
        for post in self.posts:
            for tag in post.tags:
                counts[tag] = counts.get(tag, 0) + 1
        return counts

    def with_tag(self, tag: str) -> list[Post]:
        return [post for post in self.posts if tag in post.tags]

    def by_author(self, author: str) -> list[Post]:
        return [post for post in self.posts if post.author == author]

    def get(self, slug: str) -> Post | None:
        for post in self.posts:
            if post.slug == slug:
                return post
        return None
