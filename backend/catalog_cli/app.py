"""Command line interface for the media library catalog API."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import httpx
import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"
DEFAULT_API_PREFIX = "/media-library"

# Media type -> URL segment served by the API.
MEDIA_PATHS = {
    "movie": "movies",
    "series": "series",
    "anime": "animes",
    "cartoon": "cartoons",
    "book": "books",
    "comic": "comics",
    "album": "albums",
    "video_game": "video-games",
}

CONTRIBUTOR_PATHS = {
    "actor": "actors",
    "director": "directors",
    "producer": "producers",
    "author": "authors",
    "illustrator": "illustrators",
    "singer": "singers",
    "developer": "developers",
    "publisher": "publishers",
    "label_records": "label-records",
}
COMPANY_KINDS = {"developer", "publisher", "label_records"}

app = typer.Typer(help="Interact with the media library catalog service.")
media_app = typer.Typer(help="Create, browse and edit media records.")
app.add_typer(media_app, name="media")
contributors_app = typer.Typer(help="Browse persisted contributors.")
app.add_typer(contributors_app, name="contributors")
catalogs_app = typer.Typer(help="Display the constant catalogs.")
app.add_typer(catalogs_app, name="catalogs")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the catalog API service.",
        show_default=True,
        envvar="MEDIALIB_API_BASE",
    )


def _api_prefix_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_PREFIX,
        "--api-prefix",
        help="Path prefix under which the catalog routes are mounted.",
        show_default=True,
        envvar="MEDIALIB_API_PREFIX",
    )


def _resolve_segment(value: str, mapping: dict[str, str], label: str) -> str:
    """Accept either the type name or its URL segment."""

    normalized = value.strip().lower()
    if normalized in mapping:
        return mapping[normalized]
    if normalized in mapping.values():
        return normalized
    typer.echo(f"Unknown {label} {value!r}. Allowed values: " + ", ".join(sorted(mapping)), err=True)
    raise typer.Exit(code=1)


def _media_url(prefix: str, kind: str, *parts: object) -> str:
    segments = [prefix.rstrip("/"), _resolve_segment(kind, MEDIA_PATHS, "media type")]
    segments.extend(str(part) for part in parts)
    return "/".join(segments) + ("" if parts else "/")


def _load_payload(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"Invalid JSON payload: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if not isinstance(payload, dict):
        typer.echo("Invalid JSON payload: expected an object", err=True)
        raise typer.Exit(code=1)
    return payload


def _echo_response(response: httpx.Response) -> None:
    """Print the JSON body, or exit with the error detail on failure."""

    if response.status_code == 204:
        typer.echo("No results.")
        return
    if response.status_code >= 400:
        try:
            detail: Any = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        if not isinstance(detail, str):
            detail = json.dumps(detail, indent=2, ensure_ascii=False)
        typer.echo(f"Error {response.status_code}: {detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(response.json(), indent=2, ensure_ascii=False))


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get("/health")
        _echo_response(response)


@app.command()
def metrics(api_base: str = _api_base_option(), api_prefix: str = _api_prefix_option()) -> None:
    """Display record counts per media type and contributor kind."""

    with create_client(api_base) as client:
        response = client.get(f"{api_prefix.rstrip('/')}/metrics")
        _echo_response(response)


@media_app.command("list")
def list_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """List every stored record of a media type."""

    with create_client(api_base) as client:
        _echo_response(client.get(_media_url(api_prefix, kind)))


@media_app.command("show")
def show_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    media_id: int = typer.Argument(..., help="Identifier of the record to display."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Display a single media record."""

    with create_client(api_base) as client:
        _echo_response(client.get(_media_url(api_prefix, kind, media_id)))


@media_app.command("search")
def search_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    title: str = typer.Argument(..., help="Title, or part of it, to search for."),
    season: Optional[int] = typer.Option(
        None,
        "--season",
        help="Exact current season; only for series and anime.",
    ),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Search records by title, optionally pinned to a season."""

    parts: list[object] = ["search", "title", title]
    if season is not None:
        parts.append(season)
    with create_client(api_base) as client:
        _echo_response(client.get(_media_url(api_prefix, kind, *parts)))


@media_app.command("create")
def create_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    file: Path = typer.Option(..., "--file", "-f", help="JSON file holding the record."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Create a media record from a JSON document."""

    payload = _load_payload(file)
    with create_client(api_base) as client:
        _echo_response(client.post(_media_url(api_prefix, kind), json=payload))


@media_app.command("update")
def update_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    media_id: int = typer.Argument(..., help="Identifier of the record to replace."),
    file: Path = typer.Option(..., "--file", "-f", help="JSON file holding the full record."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Fully replace a media record with a JSON document."""

    payload = _load_payload(file)
    with create_client(api_base) as client:
        _echo_response(client.put(_media_url(api_prefix, kind, media_id), json=payload))


@media_app.command("delete")
def delete_media(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    media_id: int = typer.Argument(..., help="Identifier of the record to delete."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Delete a media record and print what was removed."""

    with create_client(api_base) as client:
        _echo_response(client.delete(_media_url(api_prefix, kind, media_id)))


@media_app.command("genres")
def media_genres(
    kind: str = typer.Argument(..., help="Media type (movie, series, book, ...)."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Display the genres available to a media type."""

    with create_client(api_base) as client:
        _echo_response(client.get(_media_url(api_prefix, kind, "genres") + "/"))


@contributors_app.command("list")
def list_contributors(
    kind: str = typer.Argument(..., help="Contributor kind (actor, director, publisher, ...)."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """List every stored contributor of a kind."""

    segment = _resolve_segment(kind, CONTRIBUTOR_PATHS, "contributor kind")
    with create_client(api_base) as client:
        _echo_response(client.get(f"{api_prefix.rstrip('/')}/{segment}/"))


@contributors_app.command("search")
def search_contributor(
    kind: str = typer.Argument(..., help="Contributor kind (actor, director, publisher, ...)."),
    first_name: Optional[str] = typer.Option(None, help="First name of a person."),
    last_name: Optional[str] = typer.Option(None, help="Last name of a person."),
    name: Optional[str] = typer.Option(None, help="Name of a company."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Find a contributor by name."""

    segment = _resolve_segment(kind, CONTRIBUTOR_PATHS, "contributor kind")
    kind_name = next(key for key, value in CONTRIBUTOR_PATHS.items() if value == segment)
    if kind_name in COMPANY_KINDS:
        if not name:
            typer.echo("--name is required for company contributors.", err=True)
            raise typer.Exit(code=1)
        params = {"name": name}
    else:
        if not first_name or not last_name:
            typer.echo("--first-name and --last-name are required for people.", err=True)
            raise typer.Exit(code=1)
        params = {"first_name": first_name, "last_name": last_name}

    with create_client(api_base) as client:
        _echo_response(client.get(f"{api_prefix.rstrip('/')}/{segment}/search", params=params))


@catalogs_app.command("show")
def show_catalog(
    catalog: str = typer.Argument(..., help="Catalog to display: supports, platforms or book-formats."),
    api_base: str = _api_base_option(),
    api_prefix: str = _api_prefix_option(),
) -> None:
    """Display one of the constant catalogs."""

    if catalog not in {"supports", "platforms", "book-formats"}:
        typer.echo("Unknown catalog. Allowed values: book-formats, platforms, supports", err=True)
        raise typer.Exit(code=1)
    with create_client(api_base) as client:
        _echo_response(client.get(f"{api_prefix.rstrip('/')}/{catalog}/"))
