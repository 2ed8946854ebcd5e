import logging
from datetime import UTC, datetime
from uuid import uuid4

from sampurnan.domain.blog.model.article import ArticleId, BlogArticle, make_excerpt
from sampurnan.domain.blog.port.repository import BlogArticleRepository
from sampurnan.domain.shared.confirmation import require_confirmation
from sampurnan.domain.shared.error import NotFoundError, ValidationError
from sampurnan.domain.shared.service import Service

logger = logging.getLogger(__name__)


def _require(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(f"{field} must not be empty.", field=field)
    return value


class BlogService(Service):
    article_repo: BlogArticleRepository

    async def get(self, id: ArticleId) -> BlogArticle:
        article = await self.article_repo.get(id)
        if article is None:
            raise NotFoundError(f"Article not found: {id}")
        return article

    async def list_articles(self, limit: int | None = None) -> list[BlogArticle]:
        return await self.article_repo.list(limit=limit)

    async def create(self, *, title: str, author: str, content: str, image_url: str = "") -> BlogArticle:
        content = _require(content, "content")
        article = BlogArticle(
            id=ArticleId(uuid4()),
            title=_require(title, "title"),
            author=author.strip(),
            content=content,
            image_url=image_url.strip(),
            excerpt=make_excerpt(content),
            published_at=datetime.now(UTC),
        )
        await self.article_repo.insert(article)
        logger.info("Published article %s", article.id)
        return article

    async def replace(
        self, id: ArticleId, *, title: str, author: str, content: str, image_url: str = ""
    ) -> BlogArticle:
        article = await self.get(id)
        article.revise(
            title=_require(title, "title"),
            author=author.strip(),
            content=_require(content, "content"),
            image_url=image_url.strip(),
        )
        await self.article_repo.update(article)
        return article

    async def delete(self, id: ArticleId, *, confirmed: bool) -> None:
        require_confirmation(confirmed, "an article")
        if not await self.article_repo.delete(id):
            raise NotFoundError(f"Article not found: {id}")
        logger.info("Deleted article %s", id)
