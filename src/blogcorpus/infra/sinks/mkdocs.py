"""MkDocs Output Sink for publishing a post collection as Markdown files."""

import logging
from pathlib import Path

from blogcorpus.core.loader import dump_post
from blogcorpus.core.types import Post, PostCollection

logger = logging.getLogger(__name__)


class MkDocsOutputSink:
    """Publishes a PostCollection as MkDocs-compatible Markdown files.

    Creates one .md file per post, with YAML front matter.
    Also creates an index.md listing all posts.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the MkDocs output sink.

        Args:
            output_dir: Directory where markdown files will be written

        """
        self.output_dir = Path(output_dir)

    def publish(self, collection: PostCollection, *, title: str = "Posts") -> list[Path]:
        """Publish the collection as MkDocs markdown files.

        Args:
            collection: The posts to publish
            title: Heading of the generated index page

        Returns:
            Paths of the written post files, in collection order.

        Creates the output directory if needed and removes existing top-level
        .md files before writing new ones.

        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._clean_markdown_files()

        filenames = self._assign_filenames(collection)
        written = []
        for post, filename in zip(collection.posts, filenames, strict=True):
            output_file = self.output_dir / f"{filename}.md"
            output_file.write_text(dump_post(post), encoding="utf-8")
            written.append(output_file)

        self._write_index(title, collection, filenames)
        logger.info("Published %d posts to %s", len(written), self.output_dir)
        return written

    def _clean_markdown_files(self) -> None:
        """Remove existing .md files in output directory."""
        for md_file in self.output_dir.glob("*.md"):
            md_file.unlink()

    def _assign_filenames(self, collection: PostCollection) -> list[str]:
        """Slug per post; repeated slugs get a numeric suffix."""
        used = {"index"}
        filenames = []
        for post in collection.posts:
            base = "index-post" if post.slug == "index" else post.slug
            candidate = base
            suffix = 1
            while candidate in used:
                suffix += 1
                candidate = f"{base}-{suffix}"
            used.add(candidate)
            filenames.append(candidate)
        return filenames

    def _write_index(self, title: str, collection: PostCollection, filenames: list[str]) -> None:
        """Write index.md listing all posts, newest first."""
        lines = [f"# {title}", ""]

        if not collection.posts:
            lines.append("*No posts yet.*")
        else:
            for post, filename in zip(collection.posts, filenames, strict=True):
                lines.append(f"- [{self._link_text(post)}]({filename}.md) - {post.date.isoformat()}")
                if post.author:
                    lines.append(f"  *by {post.author}*")

        lines.append("")
        (self.output_dir / "index.md").write_text("\n".join(lines), encoding="utf-8")

    @staticmethod
    def _link_text(post: Post) -> str:
        if post.subtitle:
            return f"{post.title}: {post.subtitle}"
        return post.title
