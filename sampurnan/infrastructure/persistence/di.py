from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sampurnan.config import Config
from sampurnan.domain.blog.port.repository import BlogArticleRepository
from sampurnan.domain.guestbook.port.repository import GuestbookRepository
from sampurnan.domain.manuscript.port.repository import ManuscriptRepository
from sampurnan.infrastructure.persistence.database import create_db_engine, create_session_factory
from sampurnan.infrastructure.persistence.repository.blog import SQLAlchemyBlogArticleRepository
from sampurnan.infrastructure.persistence.repository.guestbook import SQLAlchemyGuestbookRepository
from sampurnan.infrastructure.persistence.repository.manuscript import SQLAlchemyManuscriptRepository
from sampurnan.util.di.base import Provider
from sampurnan.util.di.scope import Scope


class PersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # One session per unit of work, committed when the scope closes
    @provide(scope=Scope.UOW)
    async def get_session(self, session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    manuscript_repo = provide(SQLAlchemyManuscriptRepository, scope=Scope.UOW, provides=ManuscriptRepository)
    article_repo = provide(SQLAlchemyBlogArticleRepository, scope=Scope.UOW, provides=BlogArticleRepository)
    guestbook_repo = provide(SQLAlchemyGuestbookRepository, scope=Scope.UOW, provides=GuestbookRepository)
