from sampurnan.domain.manuscript.model.value import CategoryCount
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class ListCategoryCounts(Query):
    pass


class CategoryCounts(Result):
    categories: list[CategoryCount]


class ListCategoryCountsHandler(QueryHandler[ListCategoryCounts, CategoryCounts]):
    __auth__ = public()
    manuscript_service: ManuscriptService

    async def run(self, cmd: ListCategoryCounts) -> CategoryCounts:
        return CategoryCounts(categories=await self.manuscript_service.category_counts())
