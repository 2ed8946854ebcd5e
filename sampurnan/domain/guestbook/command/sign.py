from sampurnan.domain.guestbook.model.entry import GuestbookEntry
from sampurnan.domain.guestbook.service.guestbook import GuestbookService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class SignGuestbook(Command):
    name: str
    origin: str
    message: str


class GuestbookSigned(Result):
    entry: GuestbookEntry


class SignGuestbookHandler(CommandHandler[SignGuestbook, GuestbookSigned]):
    __auth__ = public()
    guestbook_service: GuestbookService

    async def run(self, cmd: SignGuestbook) -> GuestbookSigned:
        entry = await self.guestbook_service.sign(name=cmd.name, origin=cmd.origin, message=cmd.message)
        return GuestbookSigned(entry=entry)
