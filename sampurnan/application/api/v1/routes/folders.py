"""Folder-listing proxy with its own permissive CORS headers on every response."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from sampurnan.domain.gallery.query.list_folder_images import ListFolderImages, ListFolderImagesHandler
from sampurnan.domain.shared.error import SampurnanError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/folders", tags=["Gallery"], route_class=DishkaRoute)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


@router.options("/images")
async def folder_images_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.api_route("/images", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def folder_images(request: Request, handler: FromDishka[ListFolderImagesHandler]) -> JSONResponse:
    try:
        folder_id = await _folder_id(request)
        result = await handler.run(ListFolderImages(folder_id=folder_id))
    except SampurnanError as e:
        return JSONResponse({"error": e.message}, status_code=500, headers=CORS_HEADERS)
    except Exception as e:
        logger.exception("Folder listing failed")
        return JSONResponse({"error": str(e)}, status_code=500, headers=CORS_HEADERS)
    return JSONResponse(result.model_dump(mode="json"), headers=CORS_HEADERS)


async def _folder_id(request: Request) -> str | None:
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    folder_id = body.get("folderId")
    return str(folder_id) if folder_id else None
