from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from sampurnan.domain.blog.command.delete import ArticleDeleted, DeleteArticle, DeleteArticleHandler
from sampurnan.domain.blog.command.save import (
    ArticleSaved,
    CreateArticle,
    CreateArticleHandler,
    ReplaceArticle,
    ReplaceArticleHandler,
)
from sampurnan.domain.blog.model.article import parse_article_id

router = APIRouter(prefix="/admin/blog", tags=["Admin"], route_class=DishkaRoute)


class ArticleForm(BaseModel):
    title: str
    author: str = ""
    content: str
    image_url: str = ""


@router.post("", response_model=ArticleSaved, status_code=201)
async def create_article(body: CreateArticle, handler: FromDishka[CreateArticleHandler]) -> ArticleSaved:
    return await handler.run(body)


@router.put("/{id}", response_model=ArticleSaved)
async def replace_article(id: str, body: ArticleForm, handler: FromDishka[ReplaceArticleHandler]) -> ArticleSaved:
    return await handler.run(ReplaceArticle(id=parse_article_id(id), **body.model_dump()))


@router.delete("/{id}", response_model=ArticleDeleted)
async def delete_article(id: str, handler: FromDishka[DeleteArticleHandler], confirm: bool = False) -> ArticleDeleted:
    return await handler.run(DeleteArticle(id=parse_article_id(id), confirm=confirm))
