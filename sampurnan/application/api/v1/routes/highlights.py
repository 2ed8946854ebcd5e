from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from sampurnan.domain.highlight.query.get_highlights import GetHighlights, GetHighlightsHandler, Highlights

router = APIRouter(tags=["Highlights"], route_class=DishkaRoute)


@router.get("/highlights", response_model=Highlights)
async def get_highlights(handler: FromDishka[GetHighlightsHandler]) -> Highlights:
    return await handler.run(GetHighlights())
