from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from sampurnan.domain.blog.model.article import parse_article_id
from sampurnan.domain.blog.query.get_article import ArticleDetail, GetArticle, GetArticleHandler
from sampurnan.domain.blog.query.list_articles import ArticleList, ListArticles, ListArticlesHandler

router = APIRouter(prefix="/blog", tags=["Blog"], route_class=DishkaRoute)


@router.get("", response_model=ArticleList)
async def list_articles(handler: FromDishka[ListArticlesHandler]) -> ArticleList:
    return await handler.run(ListArticles())


@router.get("/{id}", response_model=ArticleDetail)
async def get_article(id: str, handler: FromDishka[GetArticleHandler]) -> ArticleDetail:
    return await handler.run(GetArticle(id=parse_article_id(id)))
