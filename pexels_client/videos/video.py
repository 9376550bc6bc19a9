from typing import TYPE_CHECKING

from pexels_client.interfaces.request import PEXELS_VIDEO_PATH, ApiRequest, RequestBuilder
from pexels_client.models import Video

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_GET_VIDEO_PATH = "videos"


class FetchVideo(ApiRequest):
    """Retrieve a specific video by its id."""

    id: int = 0

    @classmethod
    def builder(cls) -> "FetchVideoBuilder":
        return FetchVideoBuilder()

    def path(self) -> str:
        return f"{PEXELS_VIDEO_PATH}/{PEXELS_GET_VIDEO_PATH}/{self.id}"

    def resource(self) -> str:
        return f"Video with ID {self.id}"

    async def fetch(self, client: "PexelsClient") -> Video:
        return await self._fetch(client, Video)


class FetchVideoBuilder(RequestBuilder[FetchVideo]):
    request_cls = FetchVideo

    def id(self, id: int) -> "FetchVideoBuilder":
        return self._set("id", id)
