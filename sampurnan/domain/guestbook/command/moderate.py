from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.guestbook.model.entry import EntryId
from sampurnan.domain.guestbook.query.list_entries import ModerationListing
from sampurnan.domain.guestbook.service.guestbook import GuestbookService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler


class ToggleApproval(Command):
    id: EntryId


class DeleteEntry(Command):
    id: EntryId
    confirm: bool = False


class ToggleApprovalHandler(CommandHandler[ToggleApproval, ModerationListing]):
    __auth__ = admin_only()
    identity: Identity
    guestbook_service: GuestbookService

    async def run(self, cmd: ToggleApproval) -> ModerationListing:
        return ModerationListing(entries=await self.guestbook_service.toggle_approval(cmd.id))


class DeleteEntryHandler(CommandHandler[DeleteEntry, ModerationListing]):
    __auth__ = admin_only()
    identity: Identity
    guestbook_service: GuestbookService

    async def run(self, cmd: DeleteEntry) -> ModerationListing:
        return ModerationListing(entries=await self.guestbook_service.delete(cmd.id, confirmed=cmd.confirm))
