from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.guestbook.model.entry import GuestbookEntry
from sampurnan.domain.guestbook.service.guestbook import GuestbookService
from sampurnan.domain.shared.authorization.gate import admin_only, public
from sampurnan.domain.shared.command import Result as CommandResult
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class ListApprovedEntries(Query):
    pass


class ListAllEntries(Query):
    pass


class GuestbookListing(Result):
    entries: list[GuestbookEntry]


class ModerationListing(CommandResult):
    """Every entry, approved or not, newest first."""

    entries: list[GuestbookEntry]


class ListApprovedEntriesHandler(QueryHandler[ListApprovedEntries, GuestbookListing]):
    __auth__ = public()
    guestbook_service: GuestbookService

    async def run(self, cmd: ListApprovedEntries) -> GuestbookListing:
        return GuestbookListing(entries=await self.guestbook_service.approved())


class ListAllEntriesHandler(QueryHandler[ListAllEntries, ModerationListing]):
    __auth__ = admin_only()
    identity: Identity
    guestbook_service: GuestbookService

    async def run(self, cmd: ListAllEntries) -> ModerationListing:
        return ModerationListing(entries=await self.guestbook_service.moderation_listing())
