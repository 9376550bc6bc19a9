import httpx
import pytest

from pexels_client.client import PexelsClient

API_KEY = "test-api-key"


class FakePexelsApi:
    """Stands in for api.pexels.com behind an ``httpx.MockTransport``."""

    def __init__(
        self,
        status_code: int = 200,
        json: object | None = None,
        content: bytes | None = None,
        error: Exception | None = None,
    ):
        self._status_code = status_code
        self._json = json
        self._content = content
        self._error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error:
            raise self._error
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(self._status_code, json=self._json)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def client(self) -> PexelsClient:
        return PexelsClient(API_KEY, client=self.http_client())

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


def _photo_src(photo_id: int) -> dict:
    base = f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
    return {
        "original": base,
        "large2x": f"{base}?auto=compress&cs=tinysrgb&dpr=2&h=650&w=940",
        "large": f"{base}?auto=compress&cs=tinysrgb&h=650&w=940",
        "medium": f"{base}?auto=compress&cs=tinysrgb&h=350",
        "small": f"{base}?auto=compress&cs=tinysrgb&h=130",
        "portrait": f"{base}?auto=compress&cs=tinysrgb&fit=crop&h=1200&w=800",
        "landscape": f"{base}?auto=compress&cs=tinysrgb&fit=crop&h=627&w=1200",
        "tiny": f"{base}?auto=compress&cs=tinysrgb&dpr=1&fit=crop&h=200&w=280",
    }


def make_photo(photo_id: int = 2014422) -> dict:
    return {
        "id": photo_id,
        "width": 3024,
        "height": 3024,
        "url": f"https://www.pexels.com/photo/brown-rocks-during-golden-hour-{photo_id}/",
        "photographer": "Joey Farina",
        "photographer_url": "https://www.pexels.com/@joey",
        "photographer_id": 680589,
        "avg_color": "#978E82",
        "src": _photo_src(photo_id),
        "liked": False,
        "alt": "Brown Rocks During Golden Hour",
    }


def make_video(video_id: int = 2499611) -> dict:
    return {
        "id": video_id,
        "width": 1080,
        "height": 1920,
        "url": f"https://www.pexels.com/video/{video_id}/",
        "image": f"https://images.pexels.com/videos/{video_id}/free-video-{video_id}.jpg",
        "full_res": None,
        "tags": ["nature"],
        "duration": 22,
        "user": {
            "id": 680589,
            "name": "Joey Farina",
            "url": "https://www.pexels.com/@joey",
        },
        "video_files": [
            {
                "id": 125004,
                "quality": "hd",
                "file_type": "video/mp4",
                "width": 1080,
                "height": 1920,
                "fps": 23.976,
                "link": "https://player.vimeo.com/external/342571552.hd.mp4",
            },
            {
                "id": 125005,
                "quality": None,
                "file_type": "video/mp4",
                "width": None,
                "height": None,
                "fps": None,
                "link": "https://player.vimeo.com/external/342571552.m3u8",
            },
        ],
        "video_pictures": [
            {
                "id": 308178,
                "picture": f"https://static-videos.pexels.com/videos/{video_id}/pictures/preview-0.jpg",
                "nr": 0,
            }
        ],
    }


def make_collection(collection_id: str = "9mp14cx") -> dict:
    return {
        "id": collection_id,
        "title": "Cool Cats",
        "description": None,
        "private": False,
        "media_count": 6,
        "photos_count": 5,
        "videos_count": 1,
    }


@pytest.fixture
def photo_payload() -> dict:
    return make_photo()


@pytest.fixture
def video_payload() -> dict:
    return make_video()


@pytest.fixture
def photos_page_payload() -> dict:
    return {
        "total_results": 10000,
        "page": 1,
        "per_page": 2,
        "photos": [make_photo(2014422), make_photo(2014423)],
        "next_page": "https://api.pexels.com/v1/search/?page=2&per_page=2&query=nature",
    }


@pytest.fixture
def videos_page_payload() -> dict:
    return {
        "page": 1,
        "per_page": 1,
        "total_results": 20475,
        "url": "https://www.pexels.com/videos/",
        "videos": [make_video()],
        "next_page": "https://api.pexels.com/videos/popular?page=2&per_page=1",
    }


@pytest.fixture
def collections_page_payload() -> dict:
    return {
        "collections": [make_collection("9mp14cx"), make_collection("xq2otgb")],
        "page": 2,
        "per_page": 2,
        "total_results": 5,
        "next_page": "https://api.pexels.com/v1/collections/?page=3&per_page=2",
        "prev_page": "https://api.pexels.com/v1/collections/?page=1&per_page=2",
    }


@pytest.fixture
def media_page_payload() -> dict:
    photo = {"type": "Photo", **make_photo()}
    video = {"type": "Video", **make_video()}
    return {
        "id": "9mp14cx",
        "media": [photo, video],
        "page": 1,
        "per_page": 2,
        "total_results": 6,
        "next_page": "https://api.pexels.com/v1/collections/9mp14cx?page=2&per_page=2",
    }
