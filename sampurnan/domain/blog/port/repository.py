from __future__ import annotations

from abc import abstractmethod
from typing import List, Protocol

from sampurnan.domain.blog.model.article import ArticleId, BlogArticle
from sampurnan.domain.shared.port import Port


class BlogArticleRepository(Port, Protocol):
    @abstractmethod
    async def get(self, id: ArticleId) -> BlogArticle | None: ...

    @abstractmethod
    async def list(self, *, limit: int | None = None) -> List[BlogArticle]:
        """Newest first."""
        ...

    @abstractmethod
    async def insert(self, article: BlogArticle) -> None: ...

    @abstractmethod
    async def update(self, article: BlogArticle) -> None: ...

    @abstractmethod
    async def delete(self, id: ArticleId) -> bool: ...
