"""CRUD endpoints generated for every media type."""
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..errors import DuplicateMediaError, MediaNotFoundError
from ..media_kinds import MEDIA_KINDS, MediaKindSpec
from ..dependencies import media_service_dependency
from ..schemas import ConflictDetail
from ..services import MediaService

NO_CONTENT = {204: {"description": "No record matches the request."}}


def build_routers() -> list[APIRouter]:
    """Return one router per registered media kind."""

    return [build_media_router(spec) for spec in MEDIA_KINDS.values()]


def build_media_router(spec: MediaKindSpec) -> APIRouter:
    """Build the CRUD router of a single media kind."""

    router = APIRouter(prefix=f"/{spec.path}", tags=[spec.path])
    schema = spec.schema
    get_service = media_service_dependency(spec.media_type)
    label = spec.label

    @router.get("/", response_model=list[schema], responses=NO_CONTENT, name=f"list_{spec.media_type}")
    def list_media(service: MediaService = Depends(get_service)):
        """Return every stored record, or 204 when the table is empty."""

        items = service.list_all()
        if not items:
            return Response(status_code=204)
        return items

    @router.get("/genres/", response_model=list[str], name=f"{spec.media_type}_genres")
    def list_genres(service: MediaService = Depends(get_service)) -> list[str]:
        """Return the genre catalog available to this media type."""

        return service.genres()

    @router.get(
        "/search/title/{title}",
        response_model=list[schema],
        responses=NO_CONTENT,
        name=f"search_{spec.media_type}_by_title",
    )
    def search_by_title(title: str, service: MediaService = Depends(get_service)):
        """Return records whose title contains the search term, ignoring case."""

        items = service.get_by_title(title)
        if not items:
            return Response(status_code=204)
        return items

    if spec.has_season_key:

        @router.get(
            "/search/title/{title}/{current_season}",
            response_model=schema,
            name=f"get_{spec.media_type}_by_season",
        )
        def get_by_title_and_season(
            title: str, current_season: int, service: MediaService = Depends(get_service)
        ):
            """Return the record identified by its title and current season."""

            item = service.get_by_title_and_season(title, current_season)
            if item is None:
                raise HTTPException(
                    status_code=404,
                    detail=f"{label} {title!r} season {current_season} not found",
                )
            return item

    @router.get("/{media_id}", response_model=schema, name=f"get_{spec.media_type}")
    def get_media(media_id: int, service: MediaService = Depends(get_service)):
        """Return a single record, raising when missing."""

        try:
            return service.get_by_id(media_id)
        except MediaNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    @router.post(
        "/",
        response_model=schema,
        status_code=201,
        responses={409: {"model": ConflictDetail}},
        name=f"create_{spec.media_type}",
    )
    def create_media(
        payload: schema,
        request: Request,
        response: Response,
        service: MediaService = Depends(get_service),
    ):
        """Store a new record, rejecting payloads whose natural key already exists."""

        try:
            created = service.create(payload)
        except DuplicateMediaError as exc:
            raise _conflict(exc) from exc
        response.headers["Location"] = str(
            request.url_for(f"get_{spec.media_type}", media_id=created.id)
        )
        return created

    @router.put(
        "/{media_id}",
        response_model=schema,
        responses={409: {"model": ConflictDetail}},
        name=f"update_{spec.media_type}",
    )
    def update_media(media_id: int, payload: schema, service: MediaService = Depends(get_service)):
        """Fully replace an existing record with the payload."""

        try:
            return service.update(media_id, payload)
        except MediaNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except DuplicateMediaError as exc:
            raise _conflict(exc) from exc

    @router.delete("/{media_id}", response_model=schema, name=f"delete_{spec.media_type}")
    def delete_media(media_id: int, service: MediaService = Depends(get_service)):
        """Remove a record and return it; credited contributors are kept."""

        try:
            return service.delete(media_id)
        except MediaNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    return router


def _conflict(exc: DuplicateMediaError) -> HTTPException:
    detail = ConflictDetail(message=str(exc), existing=exc.existing.model_dump(mode="json"))
    return HTTPException(status_code=409, detail=detail.model_dump())
