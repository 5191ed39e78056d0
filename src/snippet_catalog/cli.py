"""CLI for browsing the snippet catalog (search, facets, show)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from snippet_catalog.config import DEFAULT_LIMIT, resolve_registry_path
from snippet_catalog.core.importer.loader import load_catalog
from snippet_catalog.core.search.engine import paginate, search
from snippet_catalog.core.store.catalog import CatalogStore
from snippet_catalog.errors import CatalogError
from snippet_catalog.logging_config import configure_logging
from snippet_catalog.models.component import ComponentRecord
from snippet_catalog.models.query import FilterQuery

app = typer.Typer(help="Snippet catalog: search and browse copy-paste UI components.")

RegistryOption = Annotated[
    Path | None,
    typer.Option("--registry", "-r", help="Registry JSON file or directory"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _open_catalog(registry: Path | None) -> CatalogStore:
    """Load the catalog, turning load errors into a clean exit."""
    path = registry or resolve_registry_path()
    try:
        return load_catalog(path)
    except FileNotFoundError:
        logger.error("Registry not found: {}", path)
        raise typer.Exit(1) from None
    except CatalogError as e:
        logger.error("Cannot load registry {}: {}", path, e)
        raise typer.Exit(1) from None


def _summary(record: ComponentRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "framework": record.framework,
        "category": record.category,
        "tags": sorted(record.tags),
        "is_new": record.is_new,
        "price": record.price,
    }


def _find_component(store: CatalogStore, raw: str) -> ComponentRecord:
    """Look ``raw`` up as a string id first, then as an integer id."""
    try:
        return store.get(raw)
    except CatalogError:
        if not (raw.isascii() and raw.isdecimal()):
            raise
    return store.get(int(raw))


@app.command(name="search")
def search_cmd(
    query: str = typer.Argument("", help="Search text (matches name, description, tags)"),
    framework: Annotated[
        str | None, typer.Option("--framework", "-F", help="Framework, or 'All'")
    ] = None,
    category: Annotated[str | None, typer.Option("--category", "-c", help="Category")] = None,
    tag: Annotated[
        list[str] | None, typer.Option("--tag", "-t", help="Required tag (repeatable)")
    ] = None,
    complexity: Annotated[
        str | None, typer.Option("--complexity", help="simple, medium or complex")
    ] = None,
    price: Annotated[str | None, typer.Option("--price", help="free or paid")] = None,
    new_only: bool = typer.Option(False, "--new", help="Only components flagged as new"),
    sort: Annotated[
        str | None,
        typer.Option("--sort", "-s", help="relevance, name, newest, complexity or size"),
    ] = None,
    limit: int = typer.Option(DEFAULT_LIMIT, "--limit", "-n", help="Max results"),
    offset: int = typer.Option(0, "--offset", help="Pagination offset"),
    registry: RegistryOption = None,
    output_json: JsonOption = False,
) -> None:
    """Search for components matching a query and facet filters."""
    try:
        filter_query = FilterQuery.from_params(
            search_text=query,
            framework=framework,
            category=category,
            tags=tag,
            complexity=complexity,
            price=price,
            new_only=new_only,
            sort=sort,
        )
    except CatalogError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    store = _open_catalog(registry)
    results, total = paginate(search(store, filter_query), limit=limit, offset=offset)

    if output_json:
        data = {"results": [_summary(r) for r in results], "count": len(results), "total": total}
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"Found {total} components (showing {len(results)}):\n")
    for r in results:
        marker = " [new]" if r.is_new else ""
        typer.echo(f"  {r.name}{marker}  ({r.framework} / {r.category})")
        if r.description:
            typer.echo(f"    {r.description[:80]}")
        typer.echo(f"    id={r.id}")
        typer.echo()


@app.command()
def facets(
    dimension: str = typer.Argument("framework", help="framework, category or tag"),
    registry: RegistryOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show component counts per framework, category or tag."""
    store = _open_catalog(registry)
    try:
        counts = store.facet_counts(dimension)
    except CatalogError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    rows = store.framework_facets() if dimension == "framework" else list(counts.items())

    if output_json:
        typer.echo(json.dumps({"dimension": dimension, "facets": dict(rows)}, indent=2))
        return

    for name, count in rows:
        typer.echo(f"  {name:<24} {count}")


@app.command()
def categories(
    registry: RegistryOption = None,
    output_json: JsonOption = False,
) -> None:
    """List categories in sidebar order."""
    store = _open_catalog(registry)
    counts = store.facet_counts("category")
    names = store.categories()

    if output_json:
        data = {"categories": [{"name": n, "count": counts[n]} for n in names]}
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{len(names)} categories:\n")
    for name in names:
        typer.echo(f"  {name} - {counts[name]} components")


@app.command()
def show(
    component_id: str = typer.Argument(..., help="Component id"),
    registry: RegistryOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show a component's metadata and source code."""
    store = _open_catalog(registry)
    try:
        record = _find_component(store, component_id)
    except CatalogError:
        typer.echo(f"Component '{component_id}' not found.")
        raise typer.Exit(1) from None

    if output_json:
        data = {
            **_summary(record),
            "description": record.description,
            "complexity": record.complexity,
            "file_size": record.file_size,
            "last_updated": record.last_updated,
            "license": record.license,
            "dependencies": list(record.dependencies),
            "code": record.code,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{record.name}  ({record.framework} / {record.category})")
    if record.description:
        typer.echo(record.description)
    if record.tags:
        typer.echo(f"tags: {', '.join(sorted(record.tags))}")
    if record.dependencies:
        typer.echo(f"dependencies: {', '.join(record.dependencies)}")
    typer.echo()
    typer.echo(record.code)
