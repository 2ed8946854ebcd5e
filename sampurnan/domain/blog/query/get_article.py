from sampurnan.domain.blog.model.article import ArticleId, BlogArticle
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class GetArticle(Query):
    id: ArticleId


class ArticleDetail(Result):
    article: BlogArticle


class GetArticleHandler(QueryHandler[GetArticle, ArticleDetail]):
    __auth__ = public()
    blog_service: BlogService

    async def run(self, cmd: GetArticle) -> ArticleDetail:
        return ArticleDetail(article=await self.blog_service.get(cmd.id))
