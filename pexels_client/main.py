import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import BaseModel

from pexels_client.cli import build_parser
from pexels_client.client import PexelsClient
from pexels_client.collections.media import MediaBuilder
from pexels_client.config import Settings, settings as default_settings
from pexels_client.errors import PexelsError
from pexels_client.params import Locale, MediaSort, MediaType, Orientation, Size, parse_color
from pexels_client.photos.curated import CuratedBuilder
from pexels_client.photos.search import SearchBuilder
from pexels_client.videos.popular import PopularBuilder
from pexels_client.videos.search import VideoSearchBuilder

logger = logging.getLogger(__name__)


async def run_command(args: argparse.Namespace, client: PexelsClient) -> list[BaseModel]:
    """Execute one parsed subcommand and return the models to print."""
    command = args.command

    if command == "search-photos":
        builder = SearchBuilder().query(args.query).per_page(args.per_page).page(args.page)
        if args.orientation:
            builder.orientation(Orientation.parse(args.orientation))
        if args.size:
            builder.size(Size.parse(args.size))
        if args.color:
            builder.color(parse_color(args.color))
        if args.locale:
            builder.locale(Locale.parse(args.locale))
        return list((await client.search_photos(builder)).photos)

    if command == "curated-photos":
        builder = CuratedBuilder().per_page(args.per_page).page(args.page)
        return list((await client.curated_photos(builder)).photos)

    if command == "search-videos":
        builder = VideoSearchBuilder().query(args.query).per_page(args.per_page).page(args.page)
        if args.orientation:
            builder.orientation(Orientation.parse(args.orientation))
        if args.size:
            builder.size(Size.parse(args.size))
        if args.locale:
            builder.locale(Locale.parse(args.locale))
        return list((await client.search_videos(builder)).videos)

    if command == "popular-videos":
        builder = PopularBuilder()
        for name in ("min_width", "min_height", "min_duration", "max_duration"):
            value = getattr(args, name)
            if value is not None:
                getattr(builder, name)(value)
        builder.per_page(args.per_page).page(args.page)
        return list((await client.popular_videos(builder)).videos)

    if command == "get-photo":
        return [await client.get_photo(args.id)]

    if command == "get-video":
        return [await client.get_video(args.id)]

    if command == "search-collections":
        if args.featured:
            response = await client.featured_collections(args.per_page, args.page)
        else:
            response = await client.search_collections(args.per_page, args.page)
        return list(response.collections)

    if command == "search-media":
        builder = (
            MediaBuilder()
            .id(args.id)
            .per_page(args.per_page)
            .page(args.page)
            .type(MediaType.parse(args.type))
            .sort(MediaSort.parse(args.sort))
        )
        return list((await client.search_media(builder)).media)

    raise ValueError(f"Unknown command: {command}")


async def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        async with PexelsClient.from_settings(settings, client=client) as pexels:
            items = await run_command(args, pexels)
    except PexelsError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for item in items:
        print(item.model_dump_json())
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
