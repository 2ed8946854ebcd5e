from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from sampurnan.domain.guestbook.command.sign import GuestbookSigned, SignGuestbook, SignGuestbookHandler
from sampurnan.domain.guestbook.query.list_entries import (
    GuestbookListing,
    ListApprovedEntries,
    ListApprovedEntriesHandler,
)

router = APIRouter(prefix="/guestbook", tags=["Guestbook"], route_class=DishkaRoute)


@router.get("", response_model=GuestbookListing)
async def list_entries(handler: FromDishka[ListApprovedEntriesHandler]) -> GuestbookListing:
    return await handler.run(ListApprovedEntries())


@router.post("", response_model=GuestbookSigned, status_code=201)
async def sign_guestbook(body: SignGuestbook, handler: FromDishka[SignGuestbookHandler]) -> GuestbookSigned:
    return await handler.run(body)
