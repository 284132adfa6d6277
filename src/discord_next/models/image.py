from __future__ import annotations
from enum import StrEnum


__all__ = (
    'ANIMATED_FORMATS',
    'CDN_URL',
    'Image',
    'ImageFormat',
    'STATIC_FORMATS',
)


CDN_URL = 'https://cdn.discordapp.com'


class ImageFormat(StrEnum):
    PNG = 'png'
    JPEG = 'jpg'
    WEBP = 'webp'
    GIF = 'gif'


STATIC_FORMATS = frozenset({
    ImageFormat.PNG,
    ImageFormat.JPEG,
    ImageFormat.WEBP
})
ANIMATED_FORMATS = STATIC_FORMATS | {ImageFormat.GIF}


class Image:
    """Hashed image on the discord cdn, like an avatar or an icon."""
    __slots__ = ('bare_path', 'formats')

    def __init__(
        self,
        bare_path: str,
        formats: frozenset[ImageFormat] = STATIC_FORMATS
    ) -> None:
        self.bare_path = bare_path
        self.formats = formats

    @classmethod
    def from_hash(
        cls,
        prefix: str,
        owner_id: int,
        image_hash: str
    ) -> Image:
        # ? animated hashes are prefixed with a_ and can also be served as gifs
        return cls(
            f'{prefix}/{owner_id}/{image_hash}',
            ANIMATED_FORMATS
            if image_hash.startswith('a_') else
            STATIC_FORMATS
        )

    def __repr__(self) -> str:
        return f'Image({self.bare_path!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented

        return (
            self.bare_path == other.bare_path and
            self.formats == other.formats
        )

    def __hash__(self) -> int:
        return hash((self.bare_path, self.formats))

    @property
    def animated(self) -> bool:
        return ImageFormat.GIF in self.formats

    def supports(self, format: ImageFormat) -> bool:
        return format in self.formats

    def path(self, format: ImageFormat) -> str | None:
        if not self.supports(format):
            return None

        return f'{self.bare_path}.{format.value}'

    def url(
        self,
        format: ImageFormat | None = None,
        size: int | None = None
    ) -> str | None:
        if format is None:
            format = ImageFormat.GIF if self.animated else ImageFormat.PNG

        if (path := self.path(format)) is None:
            return None

        if size is not None:
            if size < 16 or size > 4096 or size & (size - 1):
                raise ValueError('size must be a power of two between 16 and 4096')

            return f'{CDN_URL}/{path}?size={size}'

        return f'{CDN_URL}/{path}'
