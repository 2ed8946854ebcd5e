from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.manuscript.service.bulk_import import BulkImportPipeline, ImportOutcome
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class ImportManuscripts(Command):
    filename: str | None
    content: bytes


class ManuscriptsImported(Result):
    outcome: ImportOutcome


class ImportManuscriptsHandler(CommandHandler[ImportManuscripts, ManuscriptsImported]):
    __auth__ = admin_only()
    identity: Identity
    pipeline: BulkImportPipeline

    async def run(self, cmd: ImportManuscripts) -> ManuscriptsImported:
        outcome = await self.pipeline.run(cmd.filename, cmd.content)
        return ManuscriptsImported(outcome=outcome)
