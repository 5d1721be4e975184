"""Document loader: raw front matter Markdown in, Post records out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from blogcorpus.core.exceptions import InvalidMetadataError, MalformedDocumentError
from blogcorpus.core.frontmatter import dump_frontmatter, split_frontmatter
from blogcorpus.core.types import Post, PostCollection

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or "front matter"
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "invalid front matter (" + "; ".join(parts) + ")"


def load_post(text: str, *, source_path: Path | None = None) -> Post:
    """Parse one document into a Post.

    The body after the front matter block is kept exactly as written.

    Raises:
        MalformedDocumentError: if the metadata block is missing, unparseable,
            or lacks a valid title and date.

    """
    metadata, body = split_frontmatter(text, source=source_path)
    try:
        return Post.from_frontmatter(metadata, body, source_path=source_path)
    except ValidationError as exc:
        raise InvalidMetadataError(
            _describe(exc),
            source=source_path,
            errors=exc.errors(include_url=False),
        ) from exc


def load_post_file(path: Path, *, encoding: str = "utf-8") -> Post:
    """Read a Markdown file once and parse it into a Post.

    Raises:
        OSError: If the file cannot be read.
        MalformedDocumentError: If the document is malformed.

    """
    path = Path(path)
    text = path.read_text(encoding=encoding)
    post = load_post(text, source_path=path)
    logger.debug("Loaded post %r from %s", post.title, path)
    return post


def dump_post(post: Post) -> str:
    """Serialize a post back to front matter Markdown."""
    return dump_frontmatter(post.to_frontmatter(), post.body)


@dataclass(slots=True)
class LoadResult:
    """Outcome of loading a directory of posts."""

    collection: PostCollection
    failures: list[tuple[Path, MalformedDocumentError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def load_collection(
    directory: Path,
    *,
    pattern: str = "**/*.md",
    encoding: str = "utf-8",
    strict: bool = True,
) -> LoadResult:
    """Load every post under ``directory`` matching ``pattern``.

    Files are visited in path order. In strict mode the first malformed
    document raises; otherwise it is logged, recorded in
    ``LoadResult.failures`` and skipped.

    Raises:
        NotADirectoryError: if ``directory`` is not a directory.
        MalformedDocumentError: in strict mode, for the first bad document.

    """
    directory = Path(directory)
    if not directory.is_dir():
        msg = f"Posts directory not found: {directory}"
        raise NotADirectoryError(msg)

    posts: list[Post] = []
    failures: list[tuple[Path, MalformedDocumentError]] = []

    for path in sorted(p for p in directory.glob(pattern) if p.is_file()):
        try:
            posts.append(load_post_file(path, encoding=encoding))
        except MalformedDocumentError as exc:
            if strict:
                raise
            logger.warning("Skipping malformed document %s: %s", path, exc.reason)
            failures.append((path, exc))

    logger.info("Loaded %d posts from %s (%d skipped)", len(posts), directory, len(failures))
    return LoadResult(collection=PostCollection.from_posts(posts), failures=failures)
