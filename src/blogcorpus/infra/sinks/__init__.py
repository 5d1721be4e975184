"""Output sinks for post collections."""

from blogcorpus.infra.sinks.mkdocs import MkDocsOutputSink

__all__ = ["MkDocsOutputSink"]
