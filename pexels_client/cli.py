import argparse


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-n", "--per-page", type=int, default=15)
    parser.add_argument("-p", "--page", type=int, default=1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pexels-cli",
        description="A CLI for interacting with the Pexels API",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    search_photos = commands.add_parser("search-photos", help="Search for photos")
    search_photos.add_argument("-q", "--query", required=True)
    _add_paging(search_photos)
    search_photos.add_argument("--orientation")
    search_photos.add_argument("--size")
    search_photos.add_argument("--color", help="Named colour or hex code, e.g. #ffffff")
    search_photos.add_argument("--locale")

    curated = commands.add_parser("curated-photos", help="List curated photos")
    _add_paging(curated)

    search_videos = commands.add_parser("search-videos", help="Search for videos")
    search_videos.add_argument("-q", "--query", required=True)
    _add_paging(search_videos)
    search_videos.add_argument("--orientation")
    search_videos.add_argument("--size")
    search_videos.add_argument("--locale")

    popular = commands.add_parser("popular-videos", help="List popular videos")
    popular.add_argument("--min-width", type=int)
    popular.add_argument("--min-height", type=int)
    popular.add_argument("--min-duration", type=int)
    popular.add_argument("--max-duration", type=int)
    _add_paging(popular)

    get_photo = commands.add_parser("get-photo", help="Get a specific photo by ID")
    get_photo.add_argument("-i", "--id", type=int, required=True)

    get_video = commands.add_parser("get-video", help="Get a specific video by ID")
    get_video.add_argument("-i", "--id", type=int, required=True)

    collections = commands.add_parser("search-collections", help="List collections")
    _add_paging(collections)
    collections.add_argument(
        "--featured", action="store_true", help="List featured collections instead of your own"
    )

    media = commands.add_parser("search-media", help="List the media of a collection")
    media.add_argument("-i", "--id", required=True, help="Collection ID")
    _add_paging(media)
    media.add_argument("-t", "--type", default="", help="photos, videos or empty for both")
    media.add_argument("-s", "--sort", default="asc")

    return parser
