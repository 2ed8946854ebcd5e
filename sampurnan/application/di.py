from dishka import AsyncContainer, make_async_container

from sampurnan.config import Config
from sampurnan.domain.auth.util.di import AuthProvider
from sampurnan.domain.blog.util.di import BlogProvider
from sampurnan.domain.gallery.util.di import GalleryProvider
from sampurnan.domain.guestbook.util.di import GuestbookProvider
from sampurnan.domain.highlight.util.di import HighlightProvider
from sampurnan.domain.manuscript.util.di import ManuscriptProvider
from sampurnan.domain.story.util.di import StoryProvider
from sampurnan.infrastructure.drive import DriveProvider
from sampurnan.infrastructure.genai import GenAIProvider
from sampurnan.infrastructure.persistence import PersistenceProvider
from sampurnan.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        GenAIProvider(),
        DriveProvider(),
        AuthProvider(),
        ManuscriptProvider(),
        BlogProvider(),
        GuestbookProvider(),
        StoryProvider(),
        GalleryProvider(),
        HighlightProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
