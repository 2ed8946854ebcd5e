from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.blog.model.article import ArticleId, BlogArticle
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class ArticleFields(Command):
    title: str
    author: str = ""
    content: str
    image_url: str = ""


class CreateArticle(ArticleFields):
    pass


class ReplaceArticle(ArticleFields):
    id: ArticleId


class ArticleSaved(Result):
    article: BlogArticle


class CreateArticleHandler(CommandHandler[CreateArticle, ArticleSaved]):
    __auth__ = admin_only()
    identity: Identity
    blog_service: BlogService

    async def run(self, cmd: CreateArticle) -> ArticleSaved:
        article = await self.blog_service.create(
            title=cmd.title, author=cmd.author, content=cmd.content, image_url=cmd.image_url
        )
        return ArticleSaved(article=article)


class ReplaceArticleHandler(CommandHandler[ReplaceArticle, ArticleSaved]):
    __auth__ = admin_only()
    identity: Identity
    blog_service: BlogService

    async def run(self, cmd: ReplaceArticle) -> ArticleSaved:
        article = await self.blog_service.replace(
            cmd.id, title=cmd.title, author=cmd.author, content=cmd.content, image_url=cmd.image_url
        )
        return ArticleSaved(article=article)
