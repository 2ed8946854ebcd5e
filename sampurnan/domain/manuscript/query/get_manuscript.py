from sampurnan.domain.manuscript.model.aggregate import Manuscript
from sampurnan.domain.manuscript.model.gallery import Gallery
from sampurnan.domain.manuscript.model.value import ManuscriptId
from sampurnan.domain.manuscript.service.manuscript import ManuscriptService
from sampurnan.domain.shared.authorization.gate import public
from sampurnan.domain.shared.query import Query, QueryHandler, Result
from sampurnan.domain.story.port.storyteller import Storyteller


class GetManuscript(Query):
    id: ManuscriptId


class ManuscriptDetail(Result):
    manuscript: Manuscript
    gallery: Gallery
    story_enabled: bool


class GetManuscriptHandler(QueryHandler[GetManuscript, ManuscriptDetail]):
    __auth__ = public()
    manuscript_service: ManuscriptService
    storyteller: Storyteller

    async def run(self, cmd: GetManuscript) -> ManuscriptDetail:
        manuscript = await self.manuscript_service.get(cmd.id)
        return ManuscriptDetail(
            manuscript=manuscript,
            gallery=Gallery.for_manuscript(manuscript),
            story_enabled=self.storyteller.enabled,
        )
