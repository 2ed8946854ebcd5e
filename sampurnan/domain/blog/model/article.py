from datetime import datetime
from typing import NewType
from uuid import UUID

from sampurnan.domain.shared.model.aggregate import Aggregate
from sampurnan.domain.shared.model.identifier import parse_uuid

ArticleId = NewType("ArticleId", UUID)

EXCERPT_LENGTH = 150


def make_excerpt(content: str) -> str:
    """First 150 characters plus an ellipsis; short bodies are kept whole."""
    if len(content) > EXCERPT_LENGTH:
        return content[:EXCERPT_LENGTH] + "..."
    return content


class BlogArticle(Aggregate):
    """A published article. ``excerpt`` is derived from ``content`` at write time."""

    id: ArticleId
    title: str
    author: str
    content: str
    image_url: str = ""
    excerpt: str
    published_at: datetime

    def revise(self, *, title: str, author: str, content: str, image_url: str) -> None:
        self.title = title
        self.author = author
        self.content = content
        self.image_url = image_url
        self.excerpt = make_excerpt(content)


def parse_article_id(raw: str) -> ArticleId:
    return ArticleId(parse_uuid(raw, "Article"))
