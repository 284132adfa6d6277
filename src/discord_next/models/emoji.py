from __future__ import annotations
from discord_next.types import Id
from .base import RawBaseModel
from .image import ANIMATED_FORMATS, STATIC_FORMATS, Image
from .role import RoleId
from .user import User


__all__ = (
    'Emoji',
    'EmojiId',
)


class Emoji(RawBaseModel):
    # ? id and name are null for some reaction emojis
    id: Id[Emoji] | None = None
    name: str | None = None
    roles: list[RoleId] | None = None
    user: User | None = None
    require_colons: bool | None = None
    managed: bool | None = None
    animated: bool | None = None
    available: bool | None = None

    def __str__(self) -> str:
        if self.id is None:
            return self.name or ''

        prefix = 'a' if self.animated else ''
        return f'<{prefix}:{self.name}:{self.id}>'

    @property
    def image(self) -> Image | None:
        if self.id is None:
            return None

        return Image(
            f'emojis/{self.id}',
            ANIMATED_FORMATS if self.animated else STATIC_FORMATS
        )


EmojiId = Id[Emoji]
