from typing import Any

from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.manuscript.command.create import ManuscriptSaved
from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler


class ReplaceManuscript(Command):
    """Full-record replace: fields missing from ``metadata`` are reset to their defaults."""

    id: ManuscriptId
    metadata: dict[str, Any]


class ReplaceManuscriptHandler(CommandHandler[ReplaceManuscript, ManuscriptSaved]):
    __auth__ = admin_only()
    identity: Identity
    manuscript_service: ManuscriptService

    async def run(self, cmd: ReplaceManuscript) -> ManuscriptSaved:
        manuscript = await self.manuscript_service.replace(cmd.id, cmd.metadata)
        return ManuscriptSaved(manuscript=manuscript)
