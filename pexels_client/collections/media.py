from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import (
    PEXELS_COLLECTIONS_PATH,
    PEXELS_VERSION,
    ApiRequest,
    RequestBuilder,
)
from pexels_client.models import MediaResponse
from pexels_client.params import MediaSort, MediaType

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient


class Media(ApiRequest):
    """All photos and videos within a single collection.

    ``type`` narrows the listing to photos or videos; ``MediaType.ALL``
    sends no filter at all.
    """

    id: str = ""
    type: MediaType | None = None
    sort: MediaSort | None = None
    page: int | None = None
    per_page: int | None = None

    @classmethod
    def builder(cls) -> "MediaBuilder":
        return MediaBuilder()

    def path(self) -> str:
        return f"{PEXELS_VERSION}/{PEXELS_COLLECTIONS_PATH}/{self.id}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("type", self.type),
            ("sort", self.sort),
            ("page", self.page),
            ("per_page", self.per_page),
        ]

    def resource(self) -> str:
        return f"Collection with ID {self.id}"

    async def fetch(self, client: "PexelsClient") -> MediaResponse:
        return await self._fetch(client, MediaResponse)


class MediaBuilder(RequestBuilder[Media]):
    request_cls = Media

    def id(self, id: str) -> "MediaBuilder":
        return self._set("id", id)

    def type(self, media_type: MediaType) -> "MediaBuilder":
        return self._set("type", media_type)

    def sort(self, sort: MediaSort) -> "MediaBuilder":
        return self._set("sort", sort)

    def page(self, page: int) -> "MediaBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "MediaBuilder":
        return self._set("per_page", per_page)
