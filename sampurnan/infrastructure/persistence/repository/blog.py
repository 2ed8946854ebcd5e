from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sampurnan.domain.blog.model.article import ArticleId, BlogArticle
from sampurnan.domain.blog.port.repository import BlogArticleRepository
from sampurnan.infrastructure.persistence.mappers.blog import article_to_dict, row_to_article
from sampurnan.infrastructure.persistence.repository.base import execute
from sampurnan.infrastructure.persistence.tables import blog_articles_table

logger = logging.getLogger(__name__)


class SQLAlchemyBlogArticleRepository(BlogArticleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, id: ArticleId) -> BlogArticle | None:
        stmt = select(blog_articles_table).where(blog_articles_table.c.id == str(id))
        result = await execute(self.session, stmt)
        row = result.mappings().first()
        return row_to_article(dict(row)) if row else None

    async def list(self, *, limit: int | None = None) -> List[BlogArticle]:
        stmt = select(blog_articles_table).order_by(blog_articles_table.c.published_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await execute(self.session, stmt)
        return [row_to_article(dict(r)) for r in result.mappings().all()]

    async def insert(self, article: BlogArticle) -> None:
        await execute(self.session, insert(blog_articles_table).values(**article_to_dict(article)))
        logger.debug("Inserted article %s", article.id)

    async def update(self, article: BlogArticle) -> None:
        values = article_to_dict(article)
        values.pop("published_at")
        stmt = update(blog_articles_table).where(blog_articles_table.c.id == str(article.id)).values(**values)
        await execute(self.session, stmt)
        logger.debug("Updated article %s", article.id)

    async def delete(self, id: ArticleId) -> bool:
        result = await execute(self.session, delete(blog_articles_table).where(blog_articles_table.c.id == str(id)))
        return result.rowcount > 0
