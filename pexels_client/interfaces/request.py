from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from pexels_client.errors import JsonParseError, UrlParseError

if TYPE_CHECKING:
    from pexels_client.client import PexelsClient

PEXELS_API = "https://api.pexels.com"
PEXELS_VERSION = "v1"
PEXELS_VIDEO_PATH = "videos"
PEXELS_COLLECTIONS_PATH = "collections"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiRequest(BaseModel, ABC):
    """An immutable, fully configured request against one endpoint."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @abstractmethod
    def path(self) -> str:
        """Path below the API root, without a leading slash."""
        ...

    def query_pairs(self) -> list[tuple[str, Any]]:
        """Candidate query parameters in render order; unset or empty values are dropped."""
        return []

    def resource(self) -> str | None:
        """Human-readable identifier used in not-found errors."""
        return None

    def create_uri(self, api_root: str = PEXELS_API) -> str:
        uri = f"{api_root.rstrip('/')}/{self.path()}"
        pairs = [
            (key, rendered)
            for key, value in self.query_pairs()
            if value is not None and (rendered := _render(value))
        ]
        if pairs:
            uri = f"{uri}?{urlencode(pairs)}"
        try:
            httpx.URL(uri)
        except httpx.InvalidURL as e:
            raise UrlParseError(e) from e
        return uri

    async def _fetch(self, client: "PexelsClient", model: type[ModelT]) -> ModelT:
        url = self.create_uri(client.base_url)
        data = await client.make_request(url, resource=self.resource())
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise JsonParseError(e) from e


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if hasattr(value, "value") and isinstance(value.value, str):
        return value.value
    return str(value)


RequestT = TypeVar("RequestT", bound=ApiRequest)


class RequestBuilder(Generic[RequestT]):
    """Accumulates parameters for one endpoint; setters return the builder."""

    request_cls: type[RequestT]

    def __init__(self) -> None:
        self._params: dict[str, Any] = {}

    def _set(self, key: str, value: Any):
        self._params[key] = value
        return self

    def build(self) -> RequestT:
        return self.request_cls(**self._params)
