from __future__ import annotations
from .application import ApplicationId
from .channel import Channel, ChannelId
from discord_next.types import Id
from .base import RawBaseModel
from .enums import WebhookType
from .guild import GuildId
from .image import Image
from .user import User
from regex import search


__all__ = (
    'SourceGuild',
    'Webhook',
    'WebhookId',
)


class SourceGuild(RawBaseModel):
    id: GuildId
    name: str | None = None
    icon: str | None = None


class Webhook(RawBaseModel):
    id: Id[Webhook]
    type: WebhookType
    guild_id: GuildId | None = None
    channel_id: ChannelId | None = None
    user: User | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = None
    application_id: ApplicationId | None = None
    source_guild: SourceGuild | None = None
    source_channel: Channel | None = None
    url: str | None = None

    @staticmethod
    def parse_url(url: str) -> tuple[Id[Webhook], str]:
        match = search(
            r'discord(?:app)?\.com/api(?:/v\d+)?/webhooks/(?P<id>\d{17,20})/(?P<token>[\w\.\-_]{60,68})',
            url,
        )

        if match is None:
            raise ValueError('Invalid webhook URL given.')

        return Id(match['id']), match['token']

    @property
    def avatar_image(self) -> Image | None:
        if self.avatar is None:
            return None

        return Image.from_hash('avatars', self.id, self.avatar)


WebhookId = Id[Webhook]
