from sampurnan.domain.manuscript.model.catalog import CatalogPage, CatalogView
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class ListManuscripts(Query):
    search: str = ""
    category: str | None = None
    language: str | None = None
    page: int = 1


class ManuscriptCatalog(Result):
    page: CatalogPage


class ListManuscriptsHandler(QueryHandler[ListManuscripts, ManuscriptCatalog]):
    __auth__ = public()
    manuscript_service: ManuscriptService

    async def run(self, cmd: ListManuscripts) -> ManuscriptCatalog:
        view = CatalogView(await self.manuscript_service.list_all(), page_size=self.manuscript_service.page_size)
        view.set_search(cmd.search)
        view.set_category(cmd.category)
        view.set_language(cmd.language)
        view.go_to(cmd.page)
        return ManuscriptCatalog(page=view.current())
