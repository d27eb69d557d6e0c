"""
Click-based CLI for gateway-notice.

This module only ORCHESTRATES. Decisions live in the engine package.
- Loads settings
- Runs the server
- Shows what the block page would offer for a given context
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from gateway_notice import __version__
from gateway_notice.config import Settings, load_settings
from gateway_notice.model.context import extract_context
from gateway_notice.pipeline import build_view

console = Console()


def _parse_params(pairs: tuple[str, ...]) -> list[tuple[str, str]]:
    """Turn ``KEY=VALUE`` arguments into query-parameter pairs."""
    params: list[tuple[str, str]] = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="PARAMS")
        params.append((key, value))
    return params


@click.group()
@click.version_option(version=__version__, prog_name="gateway-notice")
@click.option("--config", "-c", type=click.Path(dir_okay=False), help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """gateway-notice: block page for gateway-blocked requests."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = load_settings(config)


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", "-p", default=8000, show_default=True, help="Port to listen on")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Serve the block notice page."""
    from gateway_notice.web.app import run_server

    console.print(f"Serving block notice at http://{host}:{port}/")
    run_server(host=host, port=port, settings=ctx.obj["settings"])


@main.command()
@click.argument("params", nargs=-1)
@click.pass_context
def inspect(ctx: click.Context, params: tuple[str, ...]) -> None:
    """Show the decision for a block context given as KEY=VALUE pairs.

    Uses the configured lists only; the environment service is not queried.
    """
    settings: Settings = ctx.obj["settings"]
    context = extract_context(_parse_params(params))
    view = build_view(context, settings)
    decision = view.decision

    table = Table(show_header=False, box=None)
    table.add_row("Rule ID", context.rule_id or "(unknown)")
    table.add_row("Domain", decision.domain or "(unknown)")
    table.add_row("Outcome", f"[bold]{decision.outcome.value}[/]")
    if view.show_categories:
        table.add_row("Categories", ", ".join(context.request_categories))
    console.print(Panel(table, title="Block context", expand=False))

    if decision.actions:
        for action in decision.actions.actions:
            console.print(f"[bold]{action.label}[/]: {action.href}", soft_wrap=True)
    else:
        console.print(decision.actions.note or "No action offered.")


@main.command("ticket-link")
@click.argument("params", nargs=-1)
@click.option("--base-url", help="Ticket system URL (defaults to configured ticket_url)")
@click.pass_context
def ticket_link(ctx: click.Context, params: tuple[str, ...], base_url: str | None) -> None:
    """Print the ticket deep link for a block context."""
    from gateway_notice.engine.ticket_link import build_ticket_link

    settings: Settings = ctx.obj["settings"]
    context = extract_context(_parse_params(params))
    link = build_ticket_link(context, base_url or settings.ticket_url)
    if not link:
        raise click.ClickException("Ticket base URL is not an absolute URL")
    click.echo(link)


if __name__ == "__main__":
    main()
