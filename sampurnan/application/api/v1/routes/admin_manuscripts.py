"""Admin manuscript routes: single-record form, bulk import and template download."""

import re
from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, UploadFile
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from sampurnan.domain.manuscript.command.bulk_import import ImportManuscripts, ImportManuscriptsHandler
from sampurnan.domain.manuscript.command.create import (
    CreateManuscript,
    CreateManuscriptHandler,
    ManuscriptSaved,
)
from sampurnan.domain.manuscript.command.delete import (
    DeleteManuscript,
    DeleteManuscriptHandler,
    ManuscriptDeleted,
)
from sampurnan.domain.manuscript.command.replace import ReplaceManuscript, ReplaceManuscriptHandler
from sampurnan.domain.manuscript.model.value import parse_manuscript_id
from sampurnan.domain.manuscript.port.spreadsheet import SpreadsheetFormat
from sampurnan.domain.manuscript.query.download_template import DownloadTemplate, DownloadTemplateHandler
from sampurnan.domain.manuscript.service.bulk_import import ImportOutcome

router = APIRouter(prefix="/admin/manuscripts", tags=["Admin"], route_class=DishkaRoute)


class ManuscriptForm(BaseModel):
    """Field values keyed by in-app field name."""

    metadata: dict[str, Any]


@router.get("/template")
async def download_template(
    handler: FromDishka[DownloadTemplateHandler],
    format: SpreadsheetFormat = SpreadsheetFormat.XLSX,
) -> StreamingResponse:
    result = await handler.run(DownloadTemplate(format=format))
    safe_name = _sanitize_header_filename(result.filename)
    return StreamingResponse(
        iter([result.content]),
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{safe_name}"'},
    )


@router.post("/import", response_model=ImportOutcome)
async def import_manuscripts(file: UploadFile, handler: FromDishka[ImportManuscriptsHandler]) -> JSONResponse:
    content = await file.read()
    result = await handler.run(ImportManuscripts(filename=file.filename, content=content))
    outcome = result.outcome
    return JSONResponse(
        status_code=200 if outcome.succeeded else 422,
        content=outcome.model_dump(mode="json"),
    )


@router.post("", response_model=ManuscriptSaved, status_code=201)
async def create_manuscript(body: ManuscriptForm, handler: FromDishka[CreateManuscriptHandler]) -> ManuscriptSaved:
    return await handler.run(CreateManuscript(metadata=body.metadata))


@router.put("/{id}", response_model=ManuscriptSaved)
async def replace_manuscript(
    id: str, body: ManuscriptForm, handler: FromDishka[ReplaceManuscriptHandler]
) -> ManuscriptSaved:
    return await handler.run(ReplaceManuscript(id=parse_manuscript_id(id), metadata=body.metadata))


@router.delete("/{id}", response_model=ManuscriptDeleted)
async def delete_manuscript(
    id: str, handler: FromDishka[DeleteManuscriptHandler], confirm: bool = False
) -> ManuscriptDeleted:
    return await handler.run(DeleteManuscript(id=parse_manuscript_id(id), confirm=confirm))


def _sanitize_header_filename(filename: str) -> str:
    """Strip characters that could break Content-Disposition headers."""
    return re.sub(r'[\r\n"]', "_", filename)
