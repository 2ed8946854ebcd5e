from sampurnan.domain.auth.model.identity import Identity
from sampurnan.domain.blog.model.article import ArticleId
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.domain.shared.authorization.gate import admin_only
from sampurnan.domain.shared.command import Command, CommandHandler, Result


class DeleteArticle(Command):
    id: ArticleId
    confirm: bool = False


class ArticleDeleted(Result):
    id: ArticleId


class DeleteArticleHandler(CommandHandler[DeleteArticle, ArticleDeleted]):
    __auth__ = admin_only()
    identity: Identity
    blog_service: BlogService

    async def run(self, cmd: DeleteArticle) -> ArticleDeleted:
        await self.blog_service.delete(cmd.id, confirmed=cmd.confirm)
        return ArticleDeleted(id=cmd.id)
