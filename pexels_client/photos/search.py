from typing import TYPE_CHECKING, Any

from pexels_client.interfaces.request import PEXELS_VERSION, ApiRequest, RequestBuilder
from pexels_client.models import PhotosResponse
from pexels_client.params import Color, Hex, Locale, Orientation, Size

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_SEARCH_PATH = "search"


class Search(ApiRequest):
    """Search Pexels for any topic."""

    query: str | None = None
    page: int | None = None
    per_page: int | None = None
    orientation: Orientation | None = None
    size: Size | None = None
    color: Color | Hex | None = None
    locale: Locale | None = None

    @classmethod
    def builder(cls) -> "SearchBuilder":
        return SearchBuilder()

    def path(self) -> str:
        return f"{PEXELS_VERSION}/{PEXELS_SEARCH_PATH}"

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("query", self.query),
            ("page", self.page),
            ("per_page", self.per_page),
            ("orientation", self.orientation),
            ("size", self.size),
            ("color", self.color),
            ("locale", self.locale),
        ]

    async def fetch(self, client: "PexelsClient") -> PhotosResponse:
        return await self._fetch(client, PhotosResponse)


class SearchBuilder(RequestBuilder[Search]):
    request_cls = Search

    def query(self, query: str) -> "SearchBuilder":
        """The search query, e.g. ``Ocean`` or ``People``."""
        return self._set("query", query)

    def page(self, page: int) -> "SearchBuilder":
        return self._set("page", page)

    def per_page(self, per_page: int) -> "SearchBuilder":
        """Results per page. The API defaults to 15 and caps at 80."""
        return self._set("per_page", per_page)

    def orientation(self, orientation: Orientation) -> "SearchBuilder":
        return self._set("orientation", orientation)

    def size(self, size: Size) -> "SearchBuilder":
        """Minimum photo size: large (24MP), medium (12MP) or small (4MP)."""
        return self._set("size", size)

    def color(self, color: Color | Hex) -> "SearchBuilder":
        return self._set("color", color)

    def locale(self, locale: Locale) -> "SearchBuilder":
        return self._set("locale", locale)
