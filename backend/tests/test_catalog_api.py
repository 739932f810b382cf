"""HTTP tests for the catalog API application factory."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.catalog_api import create_app  # noqa: E402
from backend.catalog_api.models import ContributorRecord, MediaContributorLink  # noqa: E402
from backend.catalog_api.errors import StoreFailureError  # noqa: E402
from backend.catalog_api.schemas import MovieModel, VideoGameModel  # noqa: E402
from backend.catalog_api.settings import CatalogSettings  # noqa: E402

PREFIX = "/media-library"

STAR_WARS = {
    "title": "Star Wars IV",
    "runtime": 121,
    "release_date": "1977-05-25",
    "genres": ["Science Fiction", "Space Opera"],
    "supports": ["DVD", "Blu Ray"],
    "directors": [{"first_name": "George", "last_name": "Lucas"}],
    "main_actors": [
        {"first_name": "Mark", "last_name": "Hamill"},
        {"first_name": "Carrie", "last_name": "Fisher"},
    ],
}


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    """Provide a test client backed by an isolated SQLite database."""

    db_path = tmp_path / "catalog.db"
    settings = CatalogSettings(database_url=f"sqlite:///{db_path}")
    app = create_app(settings=settings)
    return TestClient(app)


def _contributor_rows(client: TestClient, kind: str) -> list[ContributorRecord]:
    app_state = client.app.state.app_state
    with Session(app_state.engine) as session:
        statement = select(ContributorRecord).where(ContributorRecord.kind == kind)
        return list(session.exec(statement).all())


def test_health_endpoint_reports_ok_status(client: TestClient) -> None:
    """The /health endpoint should respond with an OK status payload."""

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "version": "0.1.0",
        "database": {"status": "ok", "detail": None},
    }


def test_create_movie_persists_director_and_sets_location(client: TestClient) -> None:
    """Creating a movie should assign ids to the movie and its loose contributors."""

    response = client.post(f"{PREFIX}/movies/", json=STAR_WARS)

    assert response.status_code == 201
    created = MovieModel.model_validate(response.json())
    assert created.id is not None
    assert response.headers["location"].endswith(f"{PREFIX}/movies/{created.id}")
    assert [director.last_name for director in created.directors] == ["Lucas"]
    assert created.directors[0].id is not None
    assert {actor.first_name for actor in created.main_actors} == {"Mark", "Carrie"}

    fetched = client.get(f"{PREFIX}/movies/{created.id}")
    assert fetched.status_code == 200
    assert MovieModel.model_validate(fetched.json()) == created


def test_duplicate_movie_is_rejected_without_new_contributors(client: TestClient) -> None:
    """Re-submitting the same movie should return 409 with the stored record."""

    first = client.post(f"{PREFIX}/movies/", json=STAR_WARS)
    assert first.status_code == 201

    second = client.post(f"{PREFIX}/movies/", json=STAR_WARS)

    assert second.status_code == 409
    detail = second.json()["detail"]
    assert detail["existing"]["id"] == first.json()["id"]
    assert "already exists" in detail["message"]
    assert len(_contributor_rows(client, "director")) == 1
    assert len(client.get(f"{PREFIX}/movies/").json()) == 1


def test_duplicate_detection_ignores_title_case(client: TestClient) -> None:
    """Natural keys compare titles ignoring case and surrounding whitespace."""

    client.post(f"{PREFIX}/movies/", json=STAR_WARS)

    response = client.post(
        f"{PREFIX}/movies/", json={**STAR_WARS, "title": "  star wars iv  "}
    )

    assert response.status_code == 409


def test_existing_director_is_reused_by_later_movie(client: TestClient) -> None:
    """A contributor already stored should be referenced, not duplicated."""

    first = client.post(f"{PREFIX}/movies/", json=STAR_WARS).json()
    lucas_id = first["directors"][0]["id"]

    response = client.post(
        f"{PREFIX}/movies/",
        json={"title": "X", "directors": [{"id": 999, "first_name": "george", "last_name": "LUCAS"}]},
    )

    assert response.status_code == 201
    directors = response.json()["directors"]
    assert directors == [{"id": lucas_id, "first_name": "George", "last_name": "Lucas"}]
    assert len(_contributor_rows(client, "director")) == 1


def test_repeated_contributor_in_one_payload_is_stored_once(client: TestClient) -> None:
    payload = {
        **STAR_WARS,
        "main_actors": [
            {"first_name": "Mark", "last_name": "Hamill"},
            {"first_name": "Mark", "last_name": "Hamill"},
        ],
    }

    response = client.post(f"{PREFIX}/movies/", json=payload)

    assert response.status_code == 201
    assert len(response.json()["main_actors"]) == 1
    assert len(_contributor_rows(client, "actor")) == 1


def test_same_name_in_different_roles_creates_separate_contributors(client: TestClient) -> None:
    """Director and producer tables are independent."""

    payload = {
        **STAR_WARS,
        "producers": [{"first_name": "George", "last_name": "Lucas"}],
    }

    response = client.post(f"{PREFIX}/movies/", json=payload)

    body = response.json()
    assert body["producers"][0]["id"] != body["directors"][0]["id"]
    assert len(_contributor_rows(client, "producer")) == 1
    assert len(_contributor_rows(client, "director")) == 1


def test_update_replaces_every_field_and_clears_omitted_associations(client: TestClient) -> None:
    """PUT performs a full replacement, including association fields."""

    created = client.post(
        f"{PREFIX}/video-games/",
        json={
            "title": "Hollow Knight",
            "release_date": "2017-02-24",
            "platforms": ["PC"],
            "developers": [{"name": "Team Cherry"}],
            "publishers": [{"name": "Team Cherry"}],
        },
    ).json()

    response = client.put(
        f"{PREFIX}/video-games/{created['id']}",
        json={"title": "Hollow Knight", "release_date": "2017-02-24", "multiplayer": False},
    )

    assert response.status_code == 200
    updated = VideoGameModel.model_validate(response.json())
    assert updated.id == created["id"]
    assert updated.developers == []
    assert updated.publishers == []
    assert updated.platforms == []
    persisted = client.get(f"{PREFIX}/video-games/{created['id']}").json()
    assert persisted["developers"] == []
    # Contributors stay stored after the record stops referencing them.
    assert len(_contributor_rows(client, "developer")) == 1


def test_update_rewires_contributors(client: TestClient) -> None:
    created = client.post(f"{PREFIX}/movies/", json=STAR_WARS).json()

    response = client.put(
        f"{PREFIX}/movies/{created['id']}",
        json={**STAR_WARS, "synopsis": "A long time ago", "directors": [{"first_name": "Irvin", "last_name": "Kershner"}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["synopsis"] == "A long time ago"
    assert [director["last_name"] for director in body["directors"]] == ["Kershner"]
    app_state = client.app.state.app_state
    with Session(app_state.engine) as session:
        links = session.exec(
            select(MediaContributorLink)
            .where(MediaContributorLink.media_id == created["id"])
            .where(MediaContributorLink.role == "directors")
        ).all()
    assert len(links) == 1


def test_update_unknown_movie_returns_404(client: TestClient) -> None:
    response = client.put(f"{PREFIX}/movies/42", json=STAR_WARS)

    assert response.status_code == 404
    assert _contributor_rows(client, "director") == []


def test_update_onto_another_records_key_returns_409(client: TestClient) -> None:
    """Changing a record's natural key to one already taken is a conflict."""

    first = client.post(f"{PREFIX}/movies/", json=STAR_WARS).json()
    second = client.post(f"{PREFIX}/movies/", json={"title": "Empire Strikes Back", "runtime": 124}).json()

    response = client.put(f"{PREFIX}/movies/{second['id']}", json=STAR_WARS)

    assert response.status_code == 409
    assert response.json()["detail"]["existing"]["id"] == first["id"]
    unchanged = client.get(f"{PREFIX}/movies/{second['id']}").json()
    assert unchanged["title"] == "Empire Strikes Back"


def test_update_keeping_own_key_succeeds(client: TestClient) -> None:
    created = client.post(f"{PREFIX}/movies/", json=STAR_WARS).json()

    response = client.put(f"{PREFIX}/movies/{created['id']}", json={**STAR_WARS, "original_title": "Star Wars"})

    assert response.status_code == 200
    assert response.json()["original_title"] == "Star Wars"


def test_delete_returns_record_and_keeps_contributors(client: TestClient) -> None:
    created = client.post(f"{PREFIX}/movies/", json=STAR_WARS).json()

    response = client.delete(f"{PREFIX}/movies/{created['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert client.get(f"{PREFIX}/movies/{created['id']}").status_code == 404
    assert len(_contributor_rows(client, "director")) == 1


def test_delete_unknown_record_returns_404(client: TestClient) -> None:
    client.post(f"{PREFIX}/movies/", json=STAR_WARS)

    response = client.delete(f"{PREFIX}/movies/999")

    assert response.status_code == 404
    assert len(client.get(f"{PREFIX}/movies/").json()) == 1


def test_empty_listing_returns_204(client: TestClient) -> None:
    response = client.get(f"{PREFIX}/albums/")

    assert response.status_code == 204


def test_search_by_title_matches_substring_ignoring_case(client: TestClient) -> None:
    client.post(f"{PREFIX}/movies/", json=STAR_WARS)
    client.post(f"{PREFIX}/movies/", json={"title": "Alien", "runtime": 117})

    response = client.get(f"{PREFIX}/movies/search/title/star wars")

    assert response.status_code == 200
    assert [movie["title"] for movie in response.json()] == ["Star Wars IV"]
    assert client.get(f"{PREFIX}/movies/search/title/zardoz").status_code == 204


def test_series_are_keyed_on_title_and_season(client: TestClient) -> None:
    """Seasons of the same series are separate records."""

    season_one = {"title": "The Expanse", "current_season": 1, "number_of_seasons": 6}
    assert client.post(f"{PREFIX}/series/", json=season_one).status_code == 201
    assert client.post(f"{PREFIX}/series/", json={**season_one, "current_season": 2}).status_code == 201
    assert (
        client.post(f"{PREFIX}/series/", json={**season_one, "release_date": "2015-12-14"}).status_code
        == 409
    )

    found = client.get(f"{PREFIX}/series/search/title/the expanse/2")
    assert found.status_code == 200
    assert found.json()["current_season"] == 2
    assert client.get(f"{PREFIX}/series/search/title/The Expanse/3").status_code == 404


def test_season_lookup_only_exists_for_season_keyed_types(client: TestClient) -> None:
    response = client.get(f"{PREFIX}/movies/search/title/Alien/1")

    assert response.status_code == 404


def test_books_and_comics_share_authors(client: TestClient) -> None:
    book = client.post(
        f"{PREFIX}/books/",
        json={
            "title": "Watchmen (novel)",
            "release_date": "1987-09-01",
            "format": "Pocket",
            "authors": [{"first_name": "Alan", "last_name": "Moore"}],
            "publishers": [{"name": "DC Comics"}],
        },
    ).json()
    comic = client.post(
        f"{PREFIX}/comics/",
        json={
            "title": "Watchmen",
            "release_date": "1986-09-01",
            "volumes": 12,
            "authors": [{"first_name": "Alan", "last_name": "Moore"}],
            "illustrators": [{"first_name": "Dave", "last_name": "Gibbons"}],
            "publishers": [{"name": "dc comics"}],
        },
    ).json()

    assert comic["authors"][0]["id"] == book["authors"][0]["id"]
    assert comic["publishers"][0]["id"] == book["publishers"][0]["id"]
    assert comic["media_type"] == "comic"


def test_album_key_uses_track_count_and_length(client: TestClient) -> None:
    album = {
        "title": "Discovery",
        "track_count": 14,
        "length": 60.9,
        "genres": ["Electro"],
        "singers": [{"first_name": "Thomas", "last_name": "Bangalter"}],
        "label_records": [{"name": "Virgin"}],
    }
    assert client.post(f"{PREFIX}/albums/", json=album).status_code == 201
    assert client.post(f"{PREFIX}/albums/", json=album).status_code == 409
    assert client.post(f"{PREFIX}/albums/", json={**album, "track_count": 15}).status_code == 201


def test_invalid_payload_is_rejected(client: TestClient) -> None:
    response = client.post(f"{PREFIX}/movies/", json={"title": "", "genres": ["Not A Genre"]})

    assert response.status_code == 422


def test_genre_catalogs_are_exposed_per_media_type(client: TestClient) -> None:
    movie_genres = client.get(f"{PREFIX}/movies/genres/")
    game_genres = client.get(f"{PREFIX}/video-games/genres/")

    assert movie_genres.status_code == 200
    assert "Science Fiction" in movie_genres.json()
    assert "Rogue Like" in game_genres.json()


def test_constant_catalogs(client: TestClient) -> None:
    assert "Blu Ray" in client.get(f"{PREFIX}/supports/").json()
    assert client.get(f"{PREFIX}/book-formats/").json() == ["Classical", "Pocket", "Unspecified"]
    assert "PC" in client.get(f"{PREFIX}/platforms/").json()


def test_contributor_endpoints(client: TestClient) -> None:
    assert client.get(f"{PREFIX}/directors/").status_code == 204
    client.post(f"{PREFIX}/movies/", json=STAR_WARS)

    listing = client.get(f"{PREFIX}/directors/")
    assert listing.status_code == 200
    lucas = listing.json()[0]

    found = client.get(f"{PREFIX}/directors/search", params={"first_name": "GEORGE", "last_name": "lucas"})
    assert found.json() == lucas
    assert client.get(f"{PREFIX}/directors/{lucas['id']}").json() == lucas
    # Identifiers are scoped to their contributor kind.
    assert client.get(f"{PREFIX}/producers/{lucas['id']}").status_code == 404
    assert (
        client.get(f"{PREFIX}/directors/search", params={"first_name": "Steven", "last_name": "Spielberg"}).status_code
        == 404
    )


def test_company_search_uses_name(client: TestClient) -> None:
    client.post(
        f"{PREFIX}/video-games/",
        json={"title": "Celeste", "release_date": "2018-01-25", "developers": [{"name": "Maddy Makes Games"}]},
    )

    response = client.get(f"{PREFIX}/developers/search", params={"name": "maddy makes games"})

    assert response.status_code == 200
    assert response.json()["name"] == "Maddy Makes Games"


def test_metrics_reports_counts(client: TestClient) -> None:
    client.post(f"{PREFIX}/movies/", json=STAR_WARS)
    client.post(f"{PREFIX}/series/", json={"title": "The Expanse", "current_season": 1})

    response = client.get(f"{PREFIX}/metrics")

    assert response.status_code == 200
    payload = response.json()
    assert payload["total_media"] == 2
    assert payload["media_counts"]["movie"] == 1
    assert payload["media_counts"]["album"] == 0
    assert payload["total_contributors"] == 3
    assert payload["contributor_counts"] == {"actor": 2, "director": 1}


def test_search_by_title_folds_case_of_accented_titles(client: TestClient) -> None:
    created = client.post(f"{PREFIX}/movies/", json={"title": "Élan Vital", "runtime": 95})
    assert created.status_code == 201

    lower = client.get(f"{PREFIX}/movies/search/title/élan")
    upper = client.get(f"{PREFIX}/movies/search/title/ÉLAN VITAL")

    assert lower.status_code == 200
    assert [movie["title"] for movie in lower.json()] == ["Élan Vital"]
    assert [movie["id"] for movie in upper.json()] == [created.json()["id"]]


def test_cartoon_key_uses_title_runtime_and_release_date(client: TestClient) -> None:
    cartoon = {"title": "Fantasia", "runtime": 125, "release_date": "1940-11-13"}

    assert client.post(f"{PREFIX}/cartoons/", json=cartoon).status_code == 201
    duplicate = client.post(f"{PREFIX}/cartoons/", json={**cartoon, "title": "FANTASIA"})
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"]["existing"]["title"] == "Fantasia"
    assert client.post(f"{PREFIX}/cartoons/", json={**cartoon, "runtime": 120}).status_code == 201
    assert client.post(f"{PREFIX}/cartoons/", json={**cartoon, "release_date": "2000-01-01"}).status_code == 201


def test_anime_key_ignores_release_date(client: TestClient) -> None:
    anime = {"title": "Cowboy Bebop", "current_season": 1, "release_date": "1998-04-03"}

    assert client.post(f"{PREFIX}/animes/", json=anime).status_code == 201
    assert (
        client.post(f"{PREFIX}/animes/", json={**anime, "release_date": "1999-01-01"}).status_code
        == 409
    )
    assert client.post(f"{PREFIX}/animes/", json={**anime, "current_season": 2}).status_code == 201


def test_video_game_key_uses_title_and_release_date(client: TestClient) -> None:
    game = {"title": "Celeste", "release_date": "2018-01-25", "platforms": ["PC"]}

    assert client.post(f"{PREFIX}/video-games/", json=game).status_code == 201
    duplicate = client.post(f"{PREFIX}/video-games/", json={**game, "platforms": [], "multiplayer": True})
    assert duplicate.status_code == 409
    assert client.post(f"{PREFIX}/video-games/", json={**game, "release_date": "2019-09-09"}).status_code == 201


class UnavailableMediaStore:
    """Media store standing in for an unreachable database."""

    def __getattr__(self, name: str):
        def _fail(*args, **kwargs):
            raise StoreFailureError(f"Unable to {name}")

        return _fail


def test_store_failures_are_reported_as_503(client: TestClient) -> None:
    app_state = client.app.state.app_state
    app_state.reconciler._media_store = UnavailableMediaStore()
    app_state.media_store = UnavailableMediaStore()

    created = client.post(f"{PREFIX}/movies/", json=STAR_WARS)
    listed = client.get(f"{PREFIX}/movies/")
    metrics = client.get(f"{PREFIX}/metrics")

    assert created.status_code == 503
    assert created.json() == {"detail": "Unable to find_by_natural_key"}
    assert listed.status_code == 503
    assert metrics.status_code == 503
    assert metrics.json()["detail"] == "Unable to counts"
