from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import (
    PEXELS_COLLECTIONS_PATH,
    PEXELS_VERSION,
    ApiRequest,
    RequestBuilder,
)
from pexels_client.models import CollectionsResponse

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient


class Collections(ApiRequest):
    """Collections belonging to the owner of the API key."""

    page: int | None = None
    per_page: int | None = None

    @classmethod
    def builder(cls) -> "CollectionsBuilder":
        return CollectionsBuilder()

    def path(self) -> str:
        return f"{PEXELS_VERSION}/{PEXELS_COLLECTIONS_PATH}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [("page", self.page), ("per_page", self.per_page)]

    async def fetch(self, client: "PexelsClient") -> CollectionsResponse:
        return await self._fetch(client, CollectionsResponse)


class CollectionsBuilder(RequestBuilder[Collections]):
    request_cls = Collections

    def page(self, page: int) -> "CollectionsBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "CollectionsBuilder":
        return self._set("per_page", per_page)
