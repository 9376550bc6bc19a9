import httpx
import pytest

from pexels_client.client import PexelsClient
from pexels_client.collections.media import MediaBuilder
from pexels_client.config import Settings
from pexels_client.errors import (
    ApiError,
    ApiKeyNotFoundError,
    AuthError,
    JsonParseError,
    NotFoundError,
    RateLimitError,
    RequestError,
)
from pexels_client.params import MediaType
from pexels_client.photos.search import SearchBuilder
from pexels_client.videos.popular import PopularBuilder
from tests.conftest import API_KEY, FakePexelsApi

CURATED = "https://api.pexels.com/v1/curated"


class TestMakeRequest:
    @pytest.mark.asyncio
    async def test_returns_json_on_200(self):
        api = FakePexelsApi(json={"photos": []})
        assert await api.client().make_request(CURATED) == {"photos": []}

    @pytest.mark.asyncio
    async def test_sends_raw_api_key(self):
        api = FakePexelsApi(json={})
        await api.client().make_request(CURATED)
        assert api.requests[0].headers["Authorization"] == API_KEY
        assert api.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_401_is_auth_error(self):
        api = FakePexelsApi(status_code=401, json={"error": "unauthorized"})
        with pytest.raises(AuthError) as exc_info:
            await api.client().make_request(CURATED)
        assert not isinstance(exc_info.value, ApiError)

    @pytest.mark.asyncio
    async def test_429_is_rate_limit_error(self):
        api = FakePexelsApi(status_code=429, json={})
        with pytest.raises(RateLimitError):
            await api.client().make_request(CURATED)

    @pytest.mark.asyncio
    async def test_404_includes_resource(self):
        api = FakePexelsApi(status_code=404, json={})
        with pytest.raises(NotFoundError, match="Photo with ID 123"):
            await api.client().make_request(CURATED, resource="Photo with ID 123")

    @pytest.mark.asyncio
    async def test_404_without_resource_names_url(self):
        api = FakePexelsApi(status_code=404, json={})
        with pytest.raises(NotFoundError, match="curated"):
            await api.client().make_request(CURATED)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [201, 204, 400, 403, 500, 503])
    async def test_other_status_is_api_error(self, status):
        api = FakePexelsApi(status_code=status, json={})
        with pytest.raises(ApiError) as exc_info:
            await api.client().make_request(CURATED)
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_transport_failure_is_request_error(self):
        api = FakePexelsApi(error=httpx.ConnectError("connection refused"))
        with pytest.raises(RequestError, match="connection refused"):
            await api.client().make_request(CURATED)

    @pytest.mark.asyncio
    async def test_timeout_is_request_error(self):
        api = FakePexelsApi(error=httpx.ReadTimeout("timed out"))
        with pytest.raises(RequestError):
            await api.client().make_request(CURATED)

    @pytest.mark.asyncio
    async def test_malformed_body_is_json_error(self):
        api = FakePexelsApi(content=b"<html>not json</html>")
        with pytest.raises(JsonParseError):
            await api.client().make_request(CURATED)


class TestConvenienceMethods:
    @pytest.mark.asyncio
    async def test_search_photos(self, photos_page_payload):
        api = FakePexelsApi(json=photos_page_payload)
        page = await api.client().search_photos(SearchBuilder().query("nature"))
        assert len(page.photos) == 2
        assert page.next_page == photos_page_payload["next_page"]

    @pytest.mark.asyncio
    async def test_curated_photos_defaults(self, photos_page_payload):
        api = FakePexelsApi(json=photos_page_payload)
        await api.client().curated_photos()
        assert api.last_url == CURATED

    @pytest.mark.asyncio
    async def test_get_photo(self, photo_payload):
        api = FakePexelsApi(json=photo_payload)
        photo = await api.client().get_photo(2014422)
        assert photo.id == 2014422
        assert api.last_url == "https://api.pexels.com/v1/photos/2014422"

    @pytest.mark.asyncio
    async def test_get_photo_401(self):
        api = FakePexelsApi(status_code=401, json={})
        with pytest.raises(AuthError):
            await api.client().get_photo(1)

    @pytest.mark.asyncio
    async def test_get_video(self, video_payload):
        api = FakePexelsApi(json=video_payload)
        video = await api.client().get_video(2499611)
        assert video.duration == 22

    @pytest.mark.asyncio
    async def test_popular_videos(self, videos_page_payload):
        api = FakePexelsApi(json=videos_page_payload)
        await api.client().popular_videos(PopularBuilder().min_width(1920))
        assert api.last_url == "https://api.pexels.com/videos/popular?min_width=1920"

    @pytest.mark.asyncio
    async def test_search_collections(self, collections_page_payload):
        api = FakePexelsApi(json=collections_page_payload)
        await api.client().search_collections(per_page=2, page=2)
        assert api.last_url == "https://api.pexels.com/v1/collections?page=2&per_page=2"

    @pytest.mark.asyncio
    async def test_featured_collections(self, collections_page_payload):
        api = FakePexelsApi(json=collections_page_payload)
        await api.client().featured_collections(per_page=2, page=1)
        assert api.last_url == (
            "https://api.pexels.com/v1/collections/featured?page=1&per_page=2"
        )

    @pytest.mark.asyncio
    async def test_search_media(self, media_page_payload):
        api = FakePexelsApi(json=media_page_payload)
        builder = MediaBuilder().id("9mp14cx").type(MediaType.VIDEO)
        page = await api.client().search_media(builder)
        assert page.id == "9mp14cx"
        assert api.last_url == "https://api.pexels.com/v1/collections/9mp14cx?type=videos"


class TestConstruction:
    def test_from_settings_requires_key(self):
        with pytest.raises(ApiKeyNotFoundError):
            PexelsClient.from_settings(Settings(pexels_api_key=""))

    def test_from_settings(self):
        client = PexelsClient.from_settings(
            Settings(pexels_api_key="abc", pexels_base_url="http://localhost:9000/")
        )
        assert client.base_url == "http://localhost:9000"

    @pytest.mark.asyncio
    async def test_with_base_url_shares_transport(self, photo_payload):
        api = FakePexelsApi(json=photo_payload)
        client = api.client().with_base_url("http://proxy.local")
        await client.get_photo(7)
        assert api.last_url == "http://proxy.local/v1/photos/7"
        assert api.requests[0].headers["Authorization"] == API_KEY

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        http_client = FakePexelsApi(json={}).http_client()
        async with PexelsClient(API_KEY, client=http_client):
            pass
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        client = PexelsClient(API_KEY, timeout=5.0, max_idle_connections=2)
        async with client:
            pass
        assert client._client.is_closed
