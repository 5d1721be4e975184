"""Split YAML front matter from Markdown content and write it back."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from blogcorpus.core.exceptions import FrontmatterParseError, MissingFrontmatterError

logger = logging.getLogger(__name__)

DELIMITER = "---"
_BOM = "\ufeff"
_HANDLER = frontmatter.YAMLHandler()


def split_frontmatter(
    content: str, *, source: Path | str | None = None
) -> tuple[dict[str, Any], str]:
    """Split a document into its front matter mapping and its body.

    The document must open with a ``---`` line and the block must be closed
    by another ``---`` line. Everything after the closing line is returned
    untouched as the body, including leading blank lines and trailing
    whitespace.

    Args:
        content: Raw document text.
        source: Where the text came from, used in error messages.

    Returns:
        Tuple of (metadata dict, body string). An empty block yields ``{}``.

    Raises:
        MissingFrontmatterError: if there is no opening or closing delimiter.
        FrontmatterParseError: if the block is not valid YAML or not a mapping.

    """
    if content.startswith(_BOM):
        content = content[len(_BOM) :]

    if not _HANDLER.detect(content):
        msg = "document does not start with a '---' front matter delimiter"
        raise MissingFrontmatterError(msg, source=source)

    lines = content.splitlines(keepends=True)
    for index in range(1, len(lines)):
        if _HANDLER.FM_BOUNDARY.match(lines[index]):
            raw_metadata = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        msg = "front matter block is never closed with '---'"
        raise MissingFrontmatterError(msg, source=source)

    try:
        metadata = _HANDLER.load(raw_metadata)
    except (yaml.YAMLError, ValueError) as exc:
        msg = f"front matter is not valid YAML: {exc}"
        raise FrontmatterParseError(msg, source=source) from exc

    if metadata is None:
        return {}, body
    if not isinstance(metadata, dict):
        msg = f"front matter must be a mapping, got {type(metadata).__name__}"
        raise FrontmatterParseError(msg, source=source)

    logger.debug("Parsed %d front matter keys from %s", len(metadata), source or "<text>")
    return dict(metadata), body


def dump_frontmatter(metadata: dict[str, Any], body: str = "") -> str:
    """Render metadata as a ``---`` delimited YAML block followed by ``body``.

    Keys keep their insertion order so the output reads like a hand-written post.
    """
    yaml_text = yaml.safe_dump(
        metadata,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=1000,
    )
    return f"{DELIMITER}\n{yaml_text}{DELIMITER}\n{body}"
