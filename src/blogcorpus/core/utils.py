"""Slug helpers shared by the post model and the output sinks."""

from unicodedata import normalize

from pymdownx.slugs import slugify as _md_slugify

slugify_lower = _md_slugify(case="lower", separator="-")


def slugify(text: str | None, max_len: int = 60) -> str:
    """Convert text to a URL-friendly slug using MkDocs heading semantics.

    Examples:
        >>> slugify("Cloud Build triggers with Terraform")
        'cloud-build-triggers-with-terraform'
        >>> slugify("Café à Paris")
        'cafe-a-paris'
        >>> slugify("")
        'post'

    """
    if text is None:
        return "post"

    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = slugify_lower(normalized, sep="-")

    slug = slug or "post"
    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug
