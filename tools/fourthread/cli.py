"""CLI entry-point for fetching and inspecting a 4chan thread."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from .api import FourChanAPI
from .codec import dumps_thread
from .config import FourChanConfig
from .errors import FourThreadError
from .models import Post, Thread
from .urls import file_url

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )
    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _excerpt(post: Post, width: int = 40) -> str:
    text = post.subject or post.comment
    return escape(text[:width])


def _fetch(ctx: click.Context, url: str) -> Thread:
    cfg: FourChanConfig = ctx.obj["cfg"]
    try:
        with FourChanAPI(cfg) as api:
            return api.get_thread_from_url(url)
    except (FourThreadError, httpx.HTTPError) as exc:
        console.print(f"[red]✗[/red] {exc}")
        sys.exit(1)


@click.group()
@click.option("--api-base", envvar="FOURTHREAD_API_BASE", default="https://a.4cdn.org", help="JSON API base URL")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, api_base: str, verbose: bool) -> None:
    """Fetch a 4chan thread from its board URL and inspect it."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["cfg"] = dataclasses.replace(FourChanConfig.from_env(), api_base=api_base)


# ─── Commands ────────────────────────────────────────────────────


@cli.command()
@click.argument("url")
@click.pass_context
def show(ctx: click.Context, url: str) -> None:
    """Show the posts of a thread as a table.

    Example: fourthread show https://boards.4chan.org/g/thread/51971506
    """
    thread = _fetch(ctx, url)
    table = Table(title=f"/{thread.board}/{thread.thread_no}", show_header=True, header_style="bold cyan")
    table.add_column("No", style="bold", justify="right")
    table.add_column("Re", justify="right")
    table.add_column("Name")
    table.add_column("Text", max_width=40)
    table.add_column("File")
    for post in thread:
        table.add_row(
            str(post.post_number),
            str(post.reply_to) if post.reply_to else "OP",
            escape(post.name),
            _excerpt(post),
            escape(post.full_orig_file_name) if post.has_file else "",
        )
    console.print(table)


@cli.command()
@click.argument("url")
@click.option("--indent", default=2, type=int, help="JSON indentation")
@click.pass_context
def dump(ctx: click.Context, url: str, indent: int) -> None:
    """Print a thread re-encoded as API JSON."""
    thread = _fetch(ctx, url)
    click.echo(dumps_thread(thread, indent=indent))


@cli.command()
@click.argument("url")
@click.pass_context
def tree(ctx: click.Context, url: str) -> None:
    """Print the reply tree of a thread, with attachment URLs."""
    thread = _fetch(ctx, url)
    if thread.op is None:
        console.print(f"/{thread.board}/: empty thread")
        return

    by_no = {p.post_number: p for p in thread}
    children = thread.replies_index()

    def label(post: Post) -> str:
        text = f"No.{post.post_number} {escape(post.name)} {_excerpt(post, 30)}".rstrip()
        url = file_url(thread.board, post)
        return f"{text} [dim]{url}[/dim]" if url else text

    root = Tree(label(thread.op))
    seen: set[int] = set()

    def attach(node: Tree, post: Post) -> None:
        seen.add(post.post_number)
        pending = [(node, post.post_number)]
        while pending:
            parent, no = pending.pop()
            for child_no in children.get(no, []):
                if child_no in seen:
                    continue
                seen.add(child_no)
                pending.append((parent.add(label(by_no[child_no])), child_no))

    attach(root, thread.op)
    # replies whose parent is not in this document hang off the OP
    for post in thread.posts[1:]:
        if post.post_number not in seen:
            attach(root.add(label(post)), post)
    console.print(root)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
