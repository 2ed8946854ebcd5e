"""Guestbook moderation routes. Every mutation answers with the refetched listing."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from sampurnan.domain.guestbook.command.moderate import (
    DeleteEntry,
    DeleteEntryHandler,
    ToggleApproval,
    ToggleApprovalHandler,
)
from sampurnan.domain.guestbook.model.entry import parse_entry_id
from sampurnan.domain.guestbook.query.list_entries import (
    ListAllEntries,
    ListAllEntriesHandler,
    ModerationListing,
)

router = APIRouter(prefix="/admin/guestbook", tags=["Admin"], route_class=DishkaRoute)


@router.get("", response_model=ModerationListing)
async def list_all_entries(handler: FromDishka[ListAllEntriesHandler]) -> ModerationListing:
    return await handler.run(ListAllEntries())


@router.post("/{id}/toggle", response_model=ModerationListing)
async def toggle_approval(id: str, handler: FromDishka[ToggleApprovalHandler]) -> ModerationListing:
    return await handler.run(ToggleApproval(id=parse_entry_id(id)))


@router.delete("/{id}", response_model=ModerationListing)
async def delete_entry(id: str, handler: FromDishka[DeleteEntryHandler], confirm: bool = False) -> ModerationListing:
    return await handler.run(DeleteEntry(id=parse_entry_id(id), confirm=confirm))
