from dishka import provide

from sampurnan.domain.blog.command.delete import DeleteArticleHandler
from sampurnan.domain.blog.command.save import CreateArticleHandler, ReplaceArticleHandler
from sampurnan.domain.blog.query.get_article import GetArticleHandler
from sampurnan.domain.blog.query.list_articles import ListArticlesHandler
from sampurnan.domain.blog.service.blog import BlogService
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class BlogProvider(Provider):
    blog_service = provide(BlogService, scope=Scope.UOW)

    # Command Handlers
    create_handler = provide(CreateArticleHandler, scope=Scope.UOW)
    replace_handler = provide(ReplaceArticleHandler, scope=Scope.UOW)
    delete_handler = provide(DeleteArticleHandler, scope=Scope.UOW)

    # Query Handlers
    list_handler = provide(ListArticlesHandler, scope=Scope.UOW)
    get_handler = provide(GetArticleHandler, scope=Scope.UOW)
