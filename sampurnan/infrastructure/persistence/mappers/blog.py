from typing import Any
from uuid import UUID

from sampurnan.domain.blog.model.article import ArticleId, BlogArticle
from sampurnan.infrastructure.persistence.mappers.manuscript import as_aware


def row_to_article(row: dict[str, Any]) -> BlogArticle:
    return BlogArticle(
        id=ArticleId(UUID(row["id"])),
        title=row["title"],
        author=row["author"],
        content=row["content"],
        image_url=row["image_url"],
        excerpt=row["excerpt"],
        published_at=as_aware(row["published_at"]),
    )


def article_to_dict(article: BlogArticle) -> dict[str, Any]:
    return {
        "id": str(article.id),
        "title": article.title,
        "author": article.author,
        "content": article.content,
        "image_url": article.image_url,
        "excerpt": article.excerpt,
        "published_at": article.published_at,
    }
