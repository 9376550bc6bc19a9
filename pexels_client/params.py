import re
from enum import Enum

from pexels_client.errors import (
    HexColorCodeError,
    ParseLocaleError,
    ParseMediaSortError,
    ParseMediaTypeError,
    ParseOrientationError,
    ParseSizeError,
    PexelsError,
)


class _ParsableEnum(str, Enum):
    """String enum whose value is the canonical query-string form."""

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        raise NotImplementedError

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {}

    @classmethod
    def parse(cls, value: str):
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        alias = cls._aliases().get(normalized)
        if alias is not None:
            return alias
        raise cls._parse_error(value)

    def __str__(self) -> str:
        return self.value


class Orientation(_ParsableEnum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return ParseOrientationError(value)


class Size(_ParsableEnum):
    """Minimum photo or video size."""

    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return ParseSizeError(value)


class MediaSort(_ParsableEnum):
    """Order of items in a collection. The API defaults to ascending."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return ParseMediaSortError(value)


class MediaType(_ParsableEnum):
    """Media type filter for collection listings.

    ``ALL`` is the empty value: no ``type`` parameter is sent and the API
    returns photos and videos alike.
    """

    PHOTO = "photos"
    VIDEO = "videos"
    ALL = ""

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return ParseMediaTypeError(value)

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {"photo": cls.PHOTO, "video": cls.VIDEO}


class Locale(_ParsableEnum):
    """Locale of a search query."""

    EN_US = "en-US"
    PT_BR = "pt-BR"
    ES_ES = "es-ES"
    CA_ES = "ca-ES"
    DE_DE = "de-DE"
    IT_IT = "it-IT"
    FR_FR = "fr-FR"
    SV_SE = "sv-SE"
    ID_ID = "id-ID"
    PL_PL = "pl-PL"
    JA_JP = "ja-JP"
    ZH_TW = "zh-TW"
    ZH_CN = "zh-CN"
    KO_KR = "ko-KR"
    TH_TH = "th-TH"
    NL_NL = "nl-NL"
    HU_HU = "hu-HU"
    VI_VN = "vi-VN"
    CS_CZ = "cs-CZ"
    DA_DK = "da-DK"
    FI_FI = "fi-FI"
    UK_UA = "uk-UA"
    EL_GR = "el-GR"
    RO_RO = "ro-RO"
    NB_NO = "nb-NO"
    SK_SK = "sk-SK"
    TR_TR = "tr-TR"
    RU_RU = "ru-RU"

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return ParseLocaleError(value)

    @classmethod
    def _aliases(cls) -> dict[str, "_ParsableEnum"]:
        return {member.value.lower().replace("-", "_"): member for member in cls}


class Color(_ParsableEnum):
    """Named colours accepted by the photo search ``color`` filter."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    TURQUOISE = "turquoise"
    BLUE = "blue"
    VIOLET = "violet"
    PINK = "pink"
    BROWN = "brown"
    BLACK = "black"
    GRAY = "gray"
    WHITE = "white"

    @classmethod
    def _parse_error(cls, value: str) -> PexelsError:
        return HexColorCodeError(value)


_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class Hex:
    """A hex colour code such as ``#ffffff``."""

    __slots__ = ("code",)

    def __init__(self, code: str) -> None:
        match = _HEX_PATTERN.fullmatch(code.strip())
        if match is None:
            raise HexColorCodeError(code)
        self.code = f"#{match.group(1).lower()}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Hex({self.code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


def parse_color(value: str) -> Color | Hex:
    """Parse a named colour or a hex code; raises ``HexColorCodeError``."""
    try:
        return Color.parse(value)
    except HexColorCodeError:
        return Hex(value)
