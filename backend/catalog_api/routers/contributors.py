"""Read endpoints for contributors, generated per contributor kind."""
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..catalogs import ContributorKind
from ..dependencies import get_contributor_store
from ..natural_keys import key_token
from ..schemas import CompanyModel, PersonModel
from ..stores import ContributorStore

CONTRIBUTOR_PATHS: dict[ContributorKind, str] = {
    ContributorKind.ACTOR: "actors",
    ContributorKind.DIRECTOR: "directors",
    ContributorKind.PRODUCER: "producers",
    ContributorKind.AUTHOR: "authors",
    ContributorKind.ILLUSTRATOR: "illustrators",
    ContributorKind.SINGER: "singers",
    ContributorKind.DEVELOPER: "developers",
    ContributorKind.PUBLISHER: "publishers",
    ContributorKind.LABEL_RECORDS: "label-records",
}


def build_routers() -> list[APIRouter]:
    return [build_contributor_router(kind) for kind in ContributorKind]


def build_contributor_router(kind: ContributorKind) -> APIRouter:
    """Build the list, search and detail endpoints of one contributor kind."""

    path = CONTRIBUTOR_PATHS[kind]
    router = APIRouter(prefix=f"/{path}", tags=["contributors"])
    model = PersonModel if kind.is_person else CompanyModel

    @router.get(
        "/",
        response_model=list[model],
        responses={204: {"description": "No contributor of this kind is stored."}},
        name=f"list_{kind.value}",
    )
    def list_contributors(store: ContributorStore = Depends(get_contributor_store)):
        """Return every stored contributor of this kind."""

        items = store.list_all(kind)
        if not items:
            return Response(status_code=204)
        return items

    if kind.is_person:

        @router.get("/search", response_model=model, name=f"search_{kind.value}")
        def search_person(
            first_name: str = Query(..., min_length=1, description="First name, matched ignoring case."),
            last_name: str = Query(..., min_length=1, description="Last name, matched ignoring case."),
            store: ContributorStore = Depends(get_contributor_store),
        ):
            """Return the contributor matching the given first and last name."""

            found = store.find_by_natural_key(kind, key_token((first_name, last_name)))
            if found is None:
                raise HTTPException(status_code=404, detail=f"{kind.value} {first_name} {last_name} not found")
            return found

    else:

        @router.get("/search", response_model=model, name=f"search_{kind.value}")
        def search_company(
            name: str = Query(..., min_length=1, description="Company name, matched ignoring case."),
            store: ContributorStore = Depends(get_contributor_store),
        ):
            """Return the contributor matching the given company name."""

            found = store.find_by_natural_key(kind, key_token((name,)))
            if found is None:
                raise HTTPException(status_code=404, detail=f"{kind.value} {name} not found")
            return found

    @router.get("/{contributor_id}", response_model=model, name=f"get_{kind.value}")
    def get_contributor(contributor_id: int, store: ContributorStore = Depends(get_contributor_store)):
        """Return a single contributor, raising when missing."""

        found = store.get(kind, contributor_id)
        if found is None:
            raise HTTPException(status_code=404, detail=f"{kind.value} with id {contributor_id} not found")
        return found

    return router
