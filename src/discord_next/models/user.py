from __future__ import annotations
from .enums import UserFlag, PremiumType
from discord_next.types import Id
from .image import CDN_URL, Image
from .base import RawBaseModel


__all__ = (
    'User',
    'UserId',
)


class User(RawBaseModel):
    id: Id[User]
    username: str
    discriminator: str
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
    system: bool | None = None
    mfa_enabled: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    verified: bool | None = None
    email: str | None = None
    flags: UserFlag | None = None
    premium_type: PremiumType | None = None
    public_flags: UserFlag | None = None

    @property
    def mention(self) -> str:
        return f'<@{self.id}>'

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    @property
    def default_avatar_url(self) -> str:
        avatar = (
            (self.id >> 22) % 6
            if self.discriminator in {None, '0', '0000'} else
            int(self.discriminator) % 5)

        return f'{CDN_URL}/embed/avatars/{avatar}.png'

    @property
    def avatar_image(self) -> Image | None:
        if self.avatar is None:
            return None

        return Image.from_hash('avatars', self.id, self.avatar)

    @property
    def avatar_url(self) -> str:
        if (image := self.avatar_image) is None:
            return self.default_avatar_url

        return image.url(size=1024)


UserId = Id[User]
