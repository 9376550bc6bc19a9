from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class PexelsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
    )


class PhotoSrc(PexelsModel):
    original: str
    large2x: str
    large: str
    medium: str
    small: str
    portrait: str
    landscape: str
    tiny: str


class Photo(PexelsModel):
    id: int
    width: int
    height: int
    url: str
    photographer: str
    photographer_url: str
    photographer_id: int
    avg_color: str | None = None
    src: PhotoSrc
    liked: bool = False
    alt: str | None = None


class PhotosResponse(PexelsModel):
    total_results: int
    page: int
    per_page: int
    photos: list[Photo]
    next_page: str | None = None
    prev_page: str | None = None


class User(PexelsModel):
    id: int
    name: str
    url: str


class VideoFile(PexelsModel):
    id: int
    quality: str | None = None
    file_type: str
    width: int | None = None
    height: int | None = None
    fps: float | None = None
    link: str


class VideoPicture(PexelsModel):
    id: int
    picture: str
    nr: int


class Video(PexelsModel):
    id: int
    width: int
    height: int
    url: str
    image: str
    full_res: str | None = None
    tags: list[str] = []
    duration: int
    user: User
    video_files: list[VideoFile]
    video_pictures: list[VideoPicture]


class VideoResponse(PexelsModel):
    page: int
    per_page: int
    total_results: int
    url: str | None = None
    videos: list[Video]
    next_page: str | None = None
    prev_page: str | None = None


class Collection(PexelsModel):
    id: str
    title: str
    description: str | None = None
    private: bool
    media_count: int
    photos_count: int
    videos_count: int


class CollectionsResponse(PexelsModel):
    collections: list[Collection]
    page: int
    per_page: int
    total_results: int
    next_page: str | None = None
    prev_page: str | None = None


class MediaPhoto(PexelsModel):
    type: Literal["Photo"]
    id: int
    width: int
    height: int
    url: str | None = None
    photographer: str | None = None
    photographer_url: str | None = None
    photographer_id: int
    avg_color: str | None = None
    src: PhotoSrc
    liked: bool = False
    alt: str | None = None


class MediaVideo(PexelsModel):
    type: Literal["Video"]
    id: int
    width: int
    height: int
    duration: int
    full_res: str | None = None
    tags: list[str] = []
    url: str | None = None
    image: str | None = None
    avg_color: str | None = None
    user: User
    video_files: list[VideoFile]
    video_pictures: list[VideoPicture]


# Collection media is discriminated by the payload's "type" field.
MediaItem = Annotated[MediaPhoto | MediaVideo, Field(discriminator="type")]


class MediaResponse(PexelsModel):
    id: str
    media: list[MediaItem]
    page: int
    per_page: int
    total_results: int
    next_page: str | None = None
    prev_page: str | None = None
