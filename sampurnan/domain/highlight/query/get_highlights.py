from sampurnan.domain.blog.model.article import BlogArticle
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.domain.guestbook.model.entry import GuestbookEntry
from sampurnan.domain.guestbook.service.guestbook import GuestbookService
from sampurnan.domain.manuscript.model.catalog import summarize
from sampurnan.domain.manuscript.model.value import ManuscriptSummary
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.model.value import ValueObject
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class HighlightCounts(ValueObject):
    manuscripts: int = 4
    articles: int = 3
    entries: int = 2


class GetHighlights(Query):
    pass


class Highlights(Result):
    """Home page digest: newest manuscripts, newest articles, newest approved entries."""

    manuscripts: list[ManuscriptSummary]
    articles: list[BlogArticle]
    entries: list[GuestbookEntry]


class GetHighlightsHandler(QueryHandler[GetHighlights, Highlights]):
    __auth__ = public()
    counts: HighlightCounts
    manuscript_service: ManuscriptService
    blog_service: BlogService
    guestbook_service: GuestbookService

    async def run(self, cmd: GetHighlights) -> Highlights:
        manuscripts = await self.manuscript_service.latest(self.counts.manuscripts)
        return Highlights(
            manuscripts=[summarize(m) for m in manuscripts],
            articles=await self.blog_service.list_articles(limit=self.counts.articles),
            entries=await self.guestbook_service.approved(limit=self.counts.entries),
        )
