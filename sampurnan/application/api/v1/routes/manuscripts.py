"""Public catalog, detail and story routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from sampurnan.domain.manuscript.model.value import parse_manuscript_id
from sampurnan.domain.manuscript.query.category_counts import (
    CategoryCounts,
    ListCategoryCounts,
    ListCategoryCountsHandler,
)
from sampurnan.domain.manuscript.query.get_manuscript import (
    GetManuscript,
    GetManuscriptHandler,
    ManuscriptDetail,
)
from sampurnan.domain.manuscript.query.list_manuscripts import (
    ListManuscripts,
    ListManuscriptsHandler,
    ManuscriptCatalog,
)
from sampurnan.domain.story.query.stream_story import StreamStory, StreamStoryHandler

router = APIRouter(prefix="/manuscripts", tags=["Manuscripts"], route_class=DishkaRoute)


@router.get("", response_model=ManuscriptCatalog)
async def list_manuscripts(
    handler: FromDishka[ListManuscriptsHandler],
    q: str = "",
    category: str | None = None,
    language: str | None = None,
    page: int = 1,
) -> ManuscriptCatalog:
    return await handler.run(ListManuscripts(search=q, category=category, language=language, page=page))


@router.get("/categories", response_model=CategoryCounts)
async def category_counts(handler: FromDishka[ListCategoryCountsHandler]) -> CategoryCounts:
    return await handler.run(ListCategoryCounts())


@router.get("/{id}", response_model=ManuscriptDetail)
async def get_manuscript(id: str, handler: FromDishka[GetManuscriptHandler]) -> ManuscriptDetail:
    return await handler.run(GetManuscript(id=parse_manuscript_id(id)))


@router.post("/{id}/story")
async def stream_story(id: str, handler: FromDishka[StreamStoryHandler]) -> StreamingResponse:
    result = await handler.run(StreamStory(id=parse_manuscript_id(id)))
    return StreamingResponse(result.stream, media_type="text/plain; charset=utf-8")
