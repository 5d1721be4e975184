"""Shared fixtures for the blogcorpus test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

CLOUD_BUILD_POST = """\
---
title: Cloud Build triggers with inline build configuration
subtitle: Managing triggers from Terraform
date: 2023-10-26
author: Jane Doe
tags:
  - terraform
  - cloud build
---

Cloud Build triggers can carry their build steps inline.

```hcl
resource "google_cloudbuild_trigger" "deploy" {
  build {
    step {
      name = "gcr.io/cloud-builders/gcloud"
    }
  }
}
```
"""


@pytest.fixture
def cloud_build_post() -> str:
    return CLOUD_BUILD_POST


def _make_post(
    title: str,
    date: str,
    *,
    author: str | None = None,
    tags: list[str] | None = None,
    body: str = "Body text.\n",
) -> str:
    lines = ["---", f"title: {title}", f"date: {date}"]
    if author:
        lines.append(f"author: {author}")
    if tags:
        lines.append("tags:")
        lines.extend(f"  - {tag}" for tag in tags)
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def make_post() -> Callable[..., str]:
    """Build a minimal post document from keyword fields."""
    return _make_post


@pytest.fixture
def write_post(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a document below ``tmp_path/posts`` and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / "posts" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
