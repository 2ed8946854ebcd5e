from dishka import provide

from sampurnan.config import Config
from sampurnan.domain.manuscript.command.bulk_import import ImportManuscriptsHandler
from sampurnan.domain.manuscript.command.create import CreateManuscriptHandler
from sampurnan.domain.manuscript.command.delete import DeleteManuscriptHandler
from sampurnan.domain.manuscript.command.replace import ReplaceManuscriptHandler
from sampurnan.domain.manuscript.port.repository import ManuscriptRepository
from sampurnan.domain.manuscript.port.spreadsheet import SpreadsheetCodecs, SpreadsheetFormat
from sampurnan.domain.manuscript.query.category_counts import ListCategoryCountsHandler
from sampurnan.domain.manuscript.query.download_template import DownloadTemplateHandler
from sampurnan.domain.manuscript.query.get_manuscript import GetManuscriptHandler
from sampurnan.domain.manuscript.query.list_manuscripts import ListManuscriptsHandler
from sampurnan.domain.manuscript.service.bulk_import import BulkImportPipeline
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.infrastructure.persistence.adapter.spreadsheet import CsvSpreadsheetCodec, XlsxSpreadsheetCodec
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class ManuscriptProvider(Provider):
    @provide(scope=Scope.UOW)
    def get_manuscript_service(self, manuscript_repo: ManuscriptRepository, config: Config) -> ManuscriptService:
        return ManuscriptService(
            manuscript_repo=manuscript_repo,
            sort_key=config.catalog.sort_key,
            page_size=config.catalog.page_size,
        )

    @provide(scope=Scope.APP)
    def get_spreadsheet_codecs(self) -> SpreadsheetCodecs:
        return SpreadsheetCodecs(
            {
                SpreadsheetFormat.CSV: CsvSpreadsheetCodec(),
                SpreadsheetFormat.XLSX: XlsxSpreadsheetCodec(),
            }
        )

    bulk_import_pipeline = provide(BulkImportPipeline, scope=Scope.UOW)

    # Command Handlers
    create_handler = provide(CreateManuscriptHandler, scope=Scope.UOW)
    replace_handler = provide(ReplaceManuscriptHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteManuscriptHandler, scope=Scope.UOW)
    import_handler = provide(ImportManuscriptsHandler, scope=Scope.UOW)

    # Query Handlers
    list_handler = provide(ListManuscriptsHandler, scope=Scope.UOW)
    get_handler = provide(GetManuscriptHandler, scope=Scope.UOW)
    category_counts_handler = provide(ListCategoryCountsHandler, scope=Scope.UOW)
    download_template_handler = provide(DownloadTemplateHandler, scope=Scope.UOW)
