from __future__ import annotations
from .enums import MessageType, MessageFlag, MessageActivityType, InteractionType, StickerFormatType, AttachmentFlag, AllowedMentionType
from .channel import Channel, ChannelId, ChannelMention
from .application import Application, ApplicationId
from discord_next.types import AnyId, Id
from .base import RawBaseModel
from typing import TYPE_CHECKING
from .guild import GuildId, Member
from .user import User, UserId
from datetime import datetime
from .role import RoleId
from .emoji import Emoji

if TYPE_CHECKING:
    from .webhook import Webhook


__all__ = (
    'AllowedMentions',
    'Attachment',
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
    'Message',
    'MessageActivity',
    'MessageId',
    'MessageInteraction',
    'MessageReference',
    'Reaction',
    'StickerItem',
)


class EmbedFooter(RawBaseModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedImage(RawBaseModel):
    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedThumbnail(EmbedImage):
    ...


class EmbedVideo(EmbedImage):
    ...


class EmbedProvider(RawBaseModel):
    name: str | None = None
    url: str | None = None


class EmbedAuthor(RawBaseModel):
    name: str | None = None
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedField(RawBaseModel):
    name: str
    value: str
    inline: bool | None = None


class Embed(RawBaseModel):
    title: str | None = None
    # ? always rich for bot and webhook embeds
    type: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: datetime | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedThumbnail | None = None
    video: EmbedVideo | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None


class Attachment(RawBaseModel):
    id: Id[Attachment]
    filename: str
    description: str | None = None
    content_type: str | None = None
    size: int
    url: str
    proxy_url: str
    height: int | None = None
    width: int | None = None
    ephemeral: bool | None = None
    flags: AttachmentFlag | None = None


class Reaction(RawBaseModel):
    count: int
    me: bool
    emoji: Emoji


class MessageActivity(RawBaseModel):
    type: MessageActivityType
    party_id: str | None = None


class MessageReference(RawBaseModel):
    message_id: Id[Message] | None = None
    channel_id: ChannelId | None = None
    guild_id: GuildId | None = None
    fail_if_not_exists: bool | None = None


class MessageInteraction(RawBaseModel):
    # ? interactions are not modeled
    id: AnyId
    type: InteractionType
    name: str
    user: User
    member: Member | None = None


class StickerItem(RawBaseModel):
    # ? stickers are not modeled
    id: AnyId
    name: str
    format_type: StickerFormatType


class AllowedMentions(RawBaseModel):
    parse: list[AllowedMentionType] | None = None
    roles: list[RoleId] | None = None
    users: list[UserId] | None = None
    replied_user: bool | None = None


class Message(RawBaseModel):
    id: Id[Message]
    channel_id: ChannelId
    guild_id: GuildId | None = None
    author: User
    member: Member | None = None
    content: str
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool
    mention_everyone: bool
    mentions: list[User]
    mention_roles: list[RoleId]
    mention_channels: list[ChannelMention] | None = None
    attachments: list[Attachment]
    embeds: list[Embed]
    reactions: list[Reaction] | None = None
    nonce: int | str | None = None
    pinned: bool
    webhook_id: Id[Webhook] | None = None
    type: MessageType
    activity: MessageActivity | None = None
    application: Application | None = None
    application_id: ApplicationId | None = None
    message_reference: MessageReference | None = None
    flags: MessageFlag | None = None
    sticker_items: list[StickerItem] | None = None
    referenced_message: Message | None = None
    interaction: MessageInteraction | None = None
    thread: Channel | None = None
    position: int | None = None

    @property
    def jump_url(self) -> str:
        return 'https://discord.com/channels/{guild_id}/{channel_id}/{message_id}'.format(
            guild_id=self.guild_id or '@me',
            channel_id=self.channel_id,
            message_id=self.id
        )

    @property
    def created_at(self) -> datetime:
        return self.id.timestamp


MessageId = Id[Message]
