from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class DeleteManuscript(Command):
    id: ManuscriptId
    confirm: bool = False


class ManuscriptDeleted(Result):
    id: ManuscriptId


class DeleteManuscriptHandler(CommandHandler[DeleteManuscript, ManuscriptDeleted]):
    __auth__ = admin_only()
    identity: Identity
    manuscript_service: ManuscriptService

    async def run(self, cmd: DeleteManuscript) -> ManuscriptDeleted:
        await self.manuscript_service.delete(cmd.id, confirmed=cmd.confirm)
        return ManuscriptDeleted(id=cmd.id)
