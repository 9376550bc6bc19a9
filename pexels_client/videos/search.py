from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import PEXELS_VIDEO_PATH, ApiRequest, RequestBuilder
from pexels_client.models import VideoResponse
from pexels_client.params import Locale, Orientation, Size

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_SEARCH_PATH = "search"


class VideoSearch(ApiRequest):
    """Search Pexels for videos on any topic."""

    query: str | None = None
    page: int | None = None
    per_page: int | None = None
    orientation: Orientation | None = None
    size: Size | None = None
    locale: Locale | None = None

    @classmethod
    def builder(cls) -> "VideoSearchBuilder":
        return VideoSearchBuilder()

    def path(self) -> str:
        return f"{PEXELS_VIDEO_PATH}/{PEXELS_SEARCH_PATH}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("query", self.query),
            ("page", self.page),
            ("per_page", self.per_page),
            ("orientation", self.orientation),
            ("size", self.size),
            ("locale", self.locale),
        ]

    async def fetch(self, client: "PexelsClient") -> VideoResponse:
        return await self._fetch(client, VideoResponse)


class VideoSearchBuilder(RequestBuilder[VideoSearch]):
    request_cls = VideoSearch

    def query(self, query: str) -> "VideoSearchBuilder":
        return self._set("query", query)

    def page(self, page: int) -> "VideoSearchBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "VideoSearchBuilder":
        return self._set("per_page", per_page)

    def orientation(self, orientation: Orientation) -> "VideoSearchBuilder":
        return self._set("orientation", orientation)

    def size(self, size: Size) -> "VideoSearchBuilder":
        """Minimum video size: large (4K), medium (Full HD) or small (HD)."""
        return self._set("size", size)

    def locale(self, locale: Locale) -> "VideoSearchBuilder":
        return self._set("locale", locale)
