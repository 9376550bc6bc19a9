from typing import TYPE_CHECKING

from pexels_client.interfaces.request import PEXELS_VERSION, ApiRequest, RequestBuilder
from pexels_client.models import Photo

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_GET_PHOTO_PATH = "photos"


class FetchPhoto(ApiRequest):
    """Retrieve a specific photo by its id.

    An id left at its default still renders a well-formed URL; the API
    answers it with a not-found error.
    """

    id: int = 0

    @classmethod
    def builder(cls) -> "FetchPhotoBuilder":
        return FetchPhotoBuilder()

    def path(self) -> str:
        return f"{PEXELS_VERSION}/{PEXELS_GET_PHOTO_PATH}/{self.id}"

    def resource(self) -> str:
        return f"Photo with ID {self.id}"

    async def fetch(self, client: "PexelsClient") -> Photo:
        return await self._fetch(client, Photo)


class FetchPhotoBuilder(RequestBuilder[FetchPhoto]):
    request_cls = FetchPhoto

    def id(self, id: int) -> "FetchPhotoBuilder":
        return self._set("id", id)
