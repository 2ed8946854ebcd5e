from sampurnan.domain.blog.model.article import BlogArticle
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.query import Query, QueryHandler, Result


class ListArticles(Query):
    pass


class ArticleList(Result):
    articles: list[BlogArticle]


class ListArticlesHandler(QueryHandler[ListArticles, ArticleList]):
    __auth__ = public()
    blog_service: BlogService

    async def run(self, cmd: ListArticles) -> ArticleList:
        return ArticleList(articles=await self.blog_service.list_articles())
