"""blogcorpus: load front-matter Markdown posts into a typed content collection."""

from blogcorpus.core.exceptions import BlogCorpusError, MalformedDocumentError
from blogcorpus.core.loader import dump_post, load_collection, load_post, load_post_file
from blogcorpus.core.types import Post, PostCollection

__version__ = "0.1.0"
__all__ = [
    "BlogCorpusError",
    "MalformedDocumentError",
    "Post",
    "PostCollection",
    "dump_post",
    "load_collection",
    "load_post",
    "load_post_file",
]
