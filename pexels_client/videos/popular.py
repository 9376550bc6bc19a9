from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import PEXELS_VIDEO_PATH, ApiRequest, RequestBuilder
from pexels_client.models import VideoResponse

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_POPULAR_PATH = "popular"


class Popular(ApiRequest):
    """The current popular Pexels videos."""

    min_width: int | None = None
    min_height: int | None = None
    min_duration: int | None = None
    max_duration: int | None = None
    page: int | None = None
    per_page: int | None = None

    @classmethod
    def builder(cls) -> "PopularBuilder":
        return PopularBuilder()

    def path(self) -> str:
        return f"{PEXELS_VIDEO_PATH}/{PEXELS_POPULAR_PATH}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("min_width", self.min_width),
            ("min_height", self.min_height),
            ("min_duration", self.min_duration),
            ("max_duration", self.max_duration),
            ("page", self.page),
            ("per_page", self.per_page),
        ]

    async def fetch(self, client: "PexelsClient") -> VideoResponse:
        return await self._fetch(client, VideoResponse)


class PopularBuilder(RequestBuilder[Popular]):
    request_cls = Popular

    def min_width(self, min_width: int) -> "PopularBuilder":
        """Minimum width in pixels."""
        return self._set("min_width", min_width)

    def min_height(self, min_height: int) -> "PopularBuilder":
        """Minimum height in pixels."""
        return self._set("min_height", min_height)

    def min_duration(self, min_duration: int) -> "PopularBuilder":
        """Minimum duration in seconds."""
        return self._set("min_duration", min_duration)

    def max_duration(self, max_duration: int) -> "PopularBuilder":
        """Maximum duration in seconds."""
        return self._set("max_duration", max_duration)

    def page(self, page: int) -> "PopularBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "PopularBuilder":
        return self._set("per_page", per_page)
