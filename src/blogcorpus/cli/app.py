"""Typer application for inspecting and exporting a post collection."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blogcorpus.core.config import BlogCorpusConfig
from blogcorpus.core.exceptions import MalformedDocumentError
from blogcorpus.core.loader import LoadResult, load_collection, load_post_file
from blogcorpus.core.logging import setup_logging
from blogcorpus.core.types import PostCollection
from blogcorpus.infra.sinks.mkdocs import MkDocsOutputSink

console = Console()

app = typer.Typer(
    name="blogcorpus",
    help="Load front matter Markdown posts into a typed content collection",
    add_completion=False,
)

DirectoryArg = Annotated[
    Path | None,
    typer.Argument(help="Posts directory (defaults to paths.posts_dir from the config)"),
]


@app.callback()
def main_callback(
    ctx: typer.Context,
    site_root: Annotated[
        Path | None,
        typer.Option("--site-root", help="Site root holding .blogcorpus.toml (default: cwd)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Load configuration and set up logging for every command."""
    config = BlogCorpusConfig.load(site_root.expanduser().resolve() if site_root else None)
    log_file = config.paths.resolve(config.logging.file) if config.logging.file else None
    setup_logging("DEBUG" if verbose else config.logging.level, log_file)
    ctx.obj = config


def _load(config: BlogCorpusConfig, directory: Path | None, *, strict: bool | None = None) -> LoadResult:
    posts_dir = directory if directory is not None else config.paths.abs_posts_dir
    if not posts_dir.is_dir():
        console.print(f"[red]Posts directory not found: {escape(str(posts_dir))}[/red]")
        raise typer.Exit(1)

    try:
        return load_collection(
            posts_dir,
            pattern=config.loader.pattern,
            encoding=config.loader.encoding,
            strict=config.loader.strict if strict is None else strict,
        )
    except MalformedDocumentError as exc:
        console.print(f"[red]Malformed document:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


@app.command()
def check(ctx: typer.Context, directory: DirectoryArg = None) -> None:
    """Validate every post and report malformed documents.

    Exits with status 1 when at least one document is malformed.
    """
    result = _load(ctx.obj, directory, strict=False)

    for path, error in result.failures:
        console.print(f"[bold red]✘[/bold red] {escape(str(path))}: {escape(error.reason)}")

    summary = f"{len(result.collection)} valid, {len(result.failures)} malformed"
    if result.ok:
        console.print(f"[bold green]✔[/bold green] {summary}")
        return
    console.print(f"[bold red]{summary}[/bold red]")
    raise typer.Exit(1)


@app.command(name="list")
def list_posts(
    ctx: typer.Context,
    directory: DirectoryArg = None,
    tag: Annotated[str | None, typer.Option("--tag", "-t", help="Only posts with this tag")] = None,
    author: Annotated[str | None, typer.Option("--author", "-a", help="Only posts by this author")] = None,
) -> None:
    """List posts, newest first."""
    collection = _load(ctx.obj, directory).collection

    if author is not None:
        collection = PostCollection.from_posts(collection.by_author(author))
    posts = collection.with_tag(tag) if tag is not None else list(collection.posts)

    if not posts:
        console.print("[yellow]No posts found.[/yellow]")
        return

    table = Table(title=f"Posts ({len(posts)})")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Author", style="magenta")
    table.add_column("Tags", style="dim")
    for post in posts:
        table.add_row(
            post.date.isoformat(),
            escape(post.title),
            escape(post.author or "-"),
            escape(", ".join(post.tags)),
        )
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Markdown post to inspect")],
) -> None:
    """Show the front matter of a single post."""
    try:
        post = load_post_file(file, encoding=ctx.obj.loader.encoding)
    except OSError as exc:
        console.print(f"[red]Cannot read {escape(str(file))}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    except MalformedDocumentError as exc:
        console.print(f"[red]Malformed document:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    table = Table(show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("title", escape(post.title))
    table.add_row("subtitle", escape(post.subtitle or "-"))
    table.add_row("date", post.date.isoformat())
    table.add_row("author", escape(post.author or "-"))
    table.add_row("tags", escape(", ".join(post.tags) or "-"))
    table.add_row("slug", post.slug)
    for key, value in post.extra.items():
        table.add_row(escape(str(key)), escape(str(value)))
    table.add_row("body", f"{len(post.body)} characters")
    console.print(table)


@app.command()
def tags(ctx: typer.Context, directory: DirectoryArg = None) -> None:
    """Count posts per tag."""
    counts = _load(ctx.obj, directory).collection.tags()
    if not counts:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table(title="Tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Posts", justify="right", style="green")
    for tag, count in counts.items():
        table.add_row(escape(tag), str(count))
    console.print(table)


@app.command()
def export(
    ctx: typer.Context,
    directory: DirectoryArg = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Output directory (defaults to paths.output_dir)"),
    ] = None,
    title: Annotated[str, typer.Option("--title", help="Heading of the generated index page")] = "Posts",
) -> None:
    """Publish the posts as MkDocs Markdown with an index page."""
    config: BlogCorpusConfig = ctx.obj
    collection = _load(config, directory).collection
    output_dir = out if out is not None else config.paths.abs_output_dir

    written = MkDocsOutputSink(output_dir).publish(collection, title=title)
    console.print(f"[green]Exported {len(written)} posts to {escape(str(output_dir))}[/green]")


def main() -> None:
    """Entry point used by the console script."""
    app()
