from __future__ import annotations
from .enums import ChannelType, OverwriteType, VideoQualityMode, ChannelFlag, Permission, ThreadMemberFlag
from pydantic import field_serializer
from discord_next.http import _bytes_to_base64_data
from discord_next.types import AnyId, Id
from .base import RawBaseModel, RequestModel
from .application import ApplicationId
from typing import TYPE_CHECKING
from datetime import datetime
from .user import User, UserId
from .role import Role, RoleId
from .guild import GuildId

if TYPE_CHECKING:
    from .message import Message


__all__ = (
    'Channel',
    'ChannelEdit',
    'ChannelId',
    'ChannelMention',
    'Overwrite',
    'ThreadMember',
    'ThreadMetadata',
)


class ChannelMention(RawBaseModel):
    id: Id[Channel]
    guild_id: GuildId
    type: ChannelType
    name: str


class Overwrite(RawBaseModel):
    # ? a role id or a user id, depending on type
    id: AnyId
    type: OverwriteType
    allow: Permission = Permission.NONE
    deny: Permission = Permission.NONE

    @classmethod
    def for_role(
        cls,
        role_id: RoleId,
        allow: Permission = Permission.NONE,
        deny: Permission = Permission.NONE
    ) -> Overwrite:
        return cls(
            id=role_id.erase(),
            type=OverwriteType.ROLE,
            allow=allow,
            deny=deny)

    @classmethod
    def for_member(
        cls,
        user_id: UserId,
        allow: Permission = Permission.NONE,
        deny: Permission = Permission.NONE
    ) -> Overwrite:
        return cls(
            id=user_id.erase(),
            type=OverwriteType.MEMBER,
            allow=allow,
            deny=deny)

    @property
    def role_id(self) -> RoleId | None:
        if self.type != OverwriteType.ROLE:
            return None

        return self.id.of(Role)

    @property
    def member_id(self) -> UserId | None:
        if self.type != OverwriteType.MEMBER:
            return None

        return self.id.of(User)


class ThreadMetadata(RawBaseModel):
    archived: bool
    archiver_id: UserId | None = None
    auto_archive_duration: int
    archive_timestamp: datetime
    locked: bool | None = None
    invitable: bool | None = None
    create_timestamp: datetime | None = None


class ThreadMember(RawBaseModel):
    # ? omitted in some gateway payloads
    id: Id[Channel] | None = None
    user_id: UserId | None = None
    join_timestamp: datetime
    flags: ThreadMemberFlag


class Channel(RawBaseModel):
    id: Id[Channel]
    type: ChannelType
    guild_id: GuildId | None = None
    position: int | None = None
    permission_overwrites: list[Overwrite] | None = None
    name: str | None = None
    topic: str | None = None
    nsfw: bool | None = None
    last_message_id: Id[Message] | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] | None = None
    icon: str | None = None
    owner_id: UserId | None = None
    application_id: ApplicationId | None = None
    managed: bool | None = None
    parent_id: Id[Channel] | None = None
    last_pin_timestamp: datetime | None = None
    rtc_region: str | None = None
    video_quality_mode: VideoQualityMode | None = None
    message_count: int | None = None
    member_count: int | None = None
    thread_metadata: ThreadMetadata | None = None
    member: ThreadMember | None = None
    default_auto_archive_duration: int | None = None
    permissions: Permission | None = None
    flags: ChannelFlag | None = None

    @property
    def mention(self) -> str:
        return f'<#{self.id}>'

    @property
    def is_thread(self) -> bool:
        return self.type in {
            ChannelType.ANNOUNCEMENT_THREAD,
            ChannelType.PUBLIC_THREAD,
            ChannelType.PRIVATE_THREAD
        }

    def overwrite_for(self, target_id: RoleId | UserId) -> Overwrite | None:
        for overwrite in self.permission_overwrites or []:
            if overwrite.id == target_id:
                return overwrite

        return None


class ChannelEdit(RequestModel):
    name: str | None = None
    icon: bytes | None = None
    type: ChannelType | None = None
    position: int | None = None
    topic: str | None = None
    nsfw: bool | None = None
    rate_limit_per_user: int | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    permission_overwrites: list[Overwrite] | None = None
    parent_id: Id[Channel] | None = None
    rtc_region: str | None = None
    video_quality_mode: VideoQualityMode | None = None
    default_auto_archive_duration: int | None = None
    flags: ChannelFlag | None = None
    archived: bool | None = None
    auto_archive_duration: int | None = None
    locked: bool | None = None
    invitable: bool | None = None

    @field_serializer('icon', when_used='json-unless-none')
    def _serialize_icon(self, icon: bytes) -> str:
        return _bytes_to_base64_data(icon)


ChannelId = Id[Channel]
