"""CLI interface for pagesmith: inspect and maintain a site's data directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pagesmith.config import load_config, merge_cli_overrides
from pagesmith.errors import PagesmithError
from pagesmith.pages.models import PageStatus
from pagesmith.seed import seed_site
from pagesmith.siteconfig.models import ConfigDomain
from pagesmith.site import Site

app = typer.Typer(
    name="pagesmith",
    help="Manage page compositions, section templates and global site configuration.",
    no_args_is_help=True,
)
pages_app = typer.Typer(help="Inspect pages.", no_args_is_help=True)
sections_app = typer.Typer(help="Inspect section templates.", no_args_is_help=True)
config_app = typer.Typer(help="Show or reset global configuration domains.", no_args_is_help=True)
app.add_typer(pages_app, name="pages")
app.add_typer(sections_app, name="sections")
app.add_typer(config_app, name="config")

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from pagesmith import __version__

        console.print(f"pagesmith {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .pagesmith.toml file."),
    ] = None,
    data_dir: Annotated[
        Optional[Path],
        typer.Option("--data-dir", "-d", help="Site data directory (overrides config)."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Pagesmith - schema-driven page composition."""
    config = load_config(config_path)
    config = merge_cli_overrides(config, data_dir=str(data_dir) if data_dir else None)
    ctx.obj = config


def _open(ctx: typer.Context) -> Site:
    try:
        return Site.open(ctx.obj)
    except PagesmithError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc


def _domain(value: str) -> ConfigDomain:
    try:
        return ConfigDomain(value)
    except ValueError:
        choices = ", ".join(d.value for d in ConfigDomain)
        console.print(f"[red]Error:[/red] unknown domain {value!r} (choose from {choices})")
        raise typer.Exit(1) from None


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show page, section and configuration counters."""
    site = _open(ctx)
    s = site.stats()
    table = Table(title="Site overview", show_header=False)
    table.add_row("Pages", str(s.pages))
    table.add_row("  published", str(s.published))
    table.add_row("  drafts", str(s.drafts))
    table.add_row("Sections", str(s.sections))
    table.add_row("Config domains", f"{s.configs} ({s.configs_customized} customized)")
    console.print(table)


@app.command()
def seed(ctx: typer.Context) -> None:
    """Install the starter section templates and pages."""
    site = _open(ctx)
    try:
        result = seed_site(site)
    except PagesmithError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
    console.print(
        f"[green]Seeded[/green] {len(result.sections)} sections and {len(result.pages)} pages"
    )


@app.command()
def check(ctx: typer.Context) -> None:
    """Report pages that reference missing section templates."""
    site = _open(ctx)
    dangling = site.dangling_references()
    if not dangling:
        console.print("[green]No dangling section references.[/green]")
        return
    for ref in dangling:
        console.print(f"[yellow]Warning:[/yellow] {ref}")
    raise typer.Exit(1)


@pages_app.command(name="list")
def pages_list(
    ctx: typer.Context,
    query: Annotated[
        Optional[str],
        typer.Option("--query", "-q", help="Filter by title or slug."),
    ] = None,
    status: Annotated[
        Optional[PageStatus],
        typer.Option("--status", "-s", help="Only pages with this status."),
    ] = None,
) -> None:
    """List pages."""
    site = _open(ctx)
    pages = site.pages.find_by_text(query) if query else site.pages.list()
    table = Table(title="Pages")
    for column in ("Title", "Slug", "Status", "Last modified", "Sections"):
        table.add_column(column)
    for page in pages:
        if status is not None and page.status != status:
            continue
        table.add_row(
            page.title,
            f"/{page.slug}",
            page.status.value,
            page.last_modified.isoformat(),
            ", ".join(page.sections),
        )
    console.print(table)


@sections_app.command(name="list")
def sections_list(
    ctx: typer.Context,
    query: Annotated[
        Optional[str],
        typer.Option("--query", "-q", help="Filter by name or description."),
    ] = None,
) -> None:
    """List section templates."""
    site = _open(ctx)
    templates = site.sections.search(query) if query else site.sections.list()
    table = Table(title="Section templates")
    for column in ("Id", "Name", "Type", "Fields"):
        table.add_column(column)
    for template in templates:
        table.add_row(template.id, template.name, template.type, str(len(template.fields)))
    console.print(table)


@sections_app.command(name="preview")
def sections_preview(
    ctx: typer.Context,
    template_id: Annotated[str, typer.Argument(help="Section template id.")],
) -> None:
    """Show the preview controls of a section template."""
    from pagesmith.sections.preview import render_preview

    site = _open(ctx)
    try:
        template = site.sections.get(template_id)
    except PagesmithError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
    table = Table(title=f"{template.name} ({template.type})")
    for column in ("Field", "Control", "Label", "Placeholder / hint"):
        table.add_column(column)
    for field in template.fields:
        d = render_preview(field)
        marker = "*" if d.required else ""
        table.add_row(f"{d.name}{marker}", d.kind.value, d.label, d.placeholder or d.hint or "")
    console.print(table)


@config_app.command(name="show")
def config_show(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="header, footer, navigation, seo or scripts.")],
) -> None:
    """Print the current value of a configuration domain as JSON."""
    site = _open(ctx)
    value = site.config.get(_domain(domain))
    console.print_json(json.dumps(value.to_document()))


@config_app.command(name="reset")
def config_reset(
    ctx: typer.Context,
    domain: Annotated[str, typer.Argument(help="header, footer, navigation, seo or scripts.")],
) -> None:
    """Reset a configuration domain to its default and save it."""
    site = _open(ctx)
    target = _domain(domain)
    site.config.reset(target)
    try:
        site.config.save(target)
    except PagesmithError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc
    console.print(f"[green]Reset[/green] {target.value} to defaults")
