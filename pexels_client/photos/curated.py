from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import PEXELS_VERSION, ApiRequest, RequestBuilder
from pexels_client.models import PhotosResponse

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_CURATED_PATH = "curated"


class Curated(ApiRequest):
    """Real-time photos curated by the Pexels team."""

    page: int | None = None
    per_page: int | None = None

    @classmethod
    def builder(cls) -> "CuratedBuilder":
        return CuratedBuilder()

    def path(self) -> str:
        return f"{PEXELS_VERSION}/{PEXELS_CURATED_PATH}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [("page", self.page), ("per_page", self.per_page)]

    async def fetch(self, client: "PexelsClient") -> PhotosResponse:
        return await self._fetch(client, PhotosResponse)


class CuratedBuilder(RequestBuilder[Curated]):
    request_cls = Curated

    def page(self, page: int) -> "CuratedBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "CuratedBuilder":
        return self._set("per_page", per_page)
