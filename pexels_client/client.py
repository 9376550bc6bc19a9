import logging
from typing import Any

import httpx

from pexels_client.collections.featured import Featured
from pexels_client.collections.items import Collections
from pexels_client.collections.media import MediaBuilder
from pexels_client.config import Settings, settings as default_settings
from pexels_client.errors import (
    ApiError,
    ApiKeyNotFoundError,
    AuthError,
    JsonParseError,
    NotFoundError,
    RateLimitError,
    RequestError,
    UrlParseError,
)
from pexels_client.interfaces.request import PEXELS_API
from pexels_client.models import (
    CollectionsResponse,
    MediaResponse,
    Photo,
    PhotosResponse,
    Video,
    VideoResponse,
)
from pexels_client.photos.curated import CuratedBuilder
from pexels_client.photos.photo import FetchPhoto
from pexels_client.photos.search import SearchBuilder
from pexels_client.videos.popular import PopularBuilder
from pexels_client.videos.search import VideoSearchBuilder
from pexels_client.videos.video import FetchVideo

logger = logging.getLogger(__name__)


class PexelsClient:
    """
    Async client for the Pexels API.

    Holds the API key and a pooled ``httpx.AsyncClient``. Every call is a
    single GET; nothing is retried or cached.

    Example:
        >>> async with PexelsClient("your_api_key") as client:
        ...     photos = await client.search_photos(
        ...         SearchBuilder().query("mountains").per_page(15).page(1)
        ...     )
    """

    BASE_URL = PEXELS_API

    def __init__(
        self,
        api_key: str,
        timeout: float = 30.0,
        max_idle_connections: int = 10,
        base_url: str = BASE_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                limits=httpx.Limits(max_keepalive_connections=max_idle_connections),
            )
        self._client = client

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, client: httpx.AsyncClient | None = None
    ) -> "PexelsClient":
        settings = settings or default_settings
        if not settings.pexels_api_key:
            raise ApiKeyNotFoundError()
        return cls(
            settings.pexels_api_key,
            timeout=settings.pexels_timeout,
            max_idle_connections=settings.pexels_max_idle_connections,
            base_url=settings.pexels_base_url,
            client=client,
        )

    def with_base_url(self, base_url: str) -> "PexelsClient":
        """Return a client rendering against another API root, sharing this transport."""
        return PexelsClient(self._api_key, base_url=base_url, client=self._client)

    async def make_request(self, url: str, resource: str | None = None) -> Any:
        """Send an authenticated GET and return the decoded JSON body.

        ``resource`` names what was requested (e.g. ``Photo with ID 123``)
        and ends up in the message of a not-found error.
        """
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url, headers={"Authorization": self._api_key})
        except httpx.InvalidURL as e:
            raise UrlParseError(e) from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise RequestError(e) from e

        status = response.status_code
        if status == 200:
            try:
                return response.json()
            except ValueError as e:
                raise JsonParseError(e) from e

        logger.warning("Pexels API returned %s for %s", status, url)
        if status == 401:
            raise AuthError("Invalid API key")
        if status == 429:
            raise RateLimitError()
        if status == 404:
            raise NotFoundError(f"{resource or url} not found")
        raise ApiError(status, f"Request to {url} failed with status: {status}")

    async def search_photos(self, builder: SearchBuilder) -> PhotosResponse:
        return await builder.build().fetch(self)

    async def curated_photos(self, builder: CuratedBuilder | None = None) -> PhotosResponse:
        return await (builder or CuratedBuilder()).build().fetch(self)

    async def get_photo(self, id: int) -> Photo:
        return await FetchPhoto.builder().id(id).build().fetch(self)

    async def search_videos(self, builder: VideoSearchBuilder) -> VideoResponse:
        return await builder.build().fetch(self)

    async def popular_videos(self, builder: PopularBuilder | None = None) -> VideoResponse:
        return await (builder or PopularBuilder()).build().fetch(self)

    async def get_video(self, id: int) -> Video:
        return await FetchVideo.builder().id(id).build().fetch(self)

    async def search_collections(self, per_page: int, page: int) -> CollectionsResponse:
        return await Collections.builder().per_page(per_page).page(page).build().fetch(self)

    async def featured_collections(self, per_page: int, page: int) -> CollectionsResponse:
        return await Featured.builder().per_page(per_page).page(page).build().fetch(self)

    async def search_media(self, builder: MediaBuilder) -> MediaResponse:
        return await builder.build().fetch(self)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "PexelsClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
