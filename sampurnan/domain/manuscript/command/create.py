from typing import Any

from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class CreateManuscript(Command):
    metadata: dict[str, Any]


class ManuscriptSaved(Result):
    manuscript: Manuscript


class CreateManuscriptHandler(CommandHandler[CreateManuscript, ManuscriptSaved]):
    __auth__ = admin_only()
    identity: Identity
    manuscript_service: ManuscriptService

    async def run(self, cmd: CreateManuscript) -> ManuscriptSaved:
        manuscript = await self.manuscript_service.create(cmd.metadata)
        return ManuscriptSaved(manuscript=manuscript)
