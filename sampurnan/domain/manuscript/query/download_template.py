from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.manuscript.model.schema import MANUSCRIPT_SCHEMA
from sampurnan.domain.manuscript.port.spreadsheet import SpreadsheetCodecs, SpreadsheetFormat
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.query import Query, QueryHandler, Result

TEMPLATE_BASENAME = "manuscript_import_template"


class DownloadTemplate(Query):
    format: SpreadsheetFormat = SpreadsheetFormat.XLSX


class TemplateResult(Result):
    content: bytes
    filename: str
    media_type: str


class DownloadTemplateHandler(QueryHandler[DownloadTemplate, TemplateResult]):
    __auth__ = admin_only()
    identity: Identity
    codecs: SpreadsheetCodecs

    async def run(self, cmd: DownloadTemplate) -> TemplateResult:
        content = self.codecs.for_format(cmd.format).encode_template(MANUSCRIPT_SCHEMA.fields)
        return TemplateResult(
            content=content,
            filename=f"{TEMPLATE_BASENAME}.{cmd.format}",
            media_type=cmd.format.media_type,
        )
