from __future__ import annotations
from .enums import AuditLogEvent, AuditLogEntityType, AuditLogChangeKey, ChannelType, MFALevel, VerificationLevel, ExplicitContentFilterLevel, DefaultMessageNotificationLevel, IntegrationExpireBehavior, Permission
from .integration import IntegrationAccount, IntegrationId
from discord_next.errors import UnrecognizedValue
from typing import Any, NamedTuple, Generic, TypeVar
from discord_next.types import AnyId, Id
from .application import ApplicationId
from .message import MessageId
from .channel import ChannelId, Overwrite
from .base import RawBaseModel
from functools import cache
from pydantic import TypeAdapter
from .user import User, UserId
from .webhook import Webhook
from .role import RoleId


__all__ = (
    'AuditEntryInfo',
    'AuditLog',
    'AuditLogChange',
    'AuditLogEntry',
    'AuditLogEntryId',
    'AuditLogIntegration',
    'AuditLogRole',
    'AuditLogValues',
)


T = TypeVar('T')


class AuditLogRole(RawBaseModel):
    id: RoleId
    name: str


class AuditLogValues(NamedTuple, Generic[T]):
    old: T | None
    new: T | None


CHANGE_VALUE_TYPES: dict[AuditLogChangeKey, Any] = {
    AuditLogChangeKey.NAME: str,
    AuditLogChangeKey.DESCRIPTION: str,
    AuditLogChangeKey.ICON_HASH: str,
    AuditLogChangeKey.SPLASH_HASH: str,
    AuditLogChangeKey.DISCOVERY_SPLASH_HASH: str,
    AuditLogChangeKey.BANNER_HASH: str,
    AuditLogChangeKey.OWNER_ID: UserId,
    AuditLogChangeKey.REGION: str,
    AuditLogChangeKey.PREFERRED_LOCALE: str,
    AuditLogChangeKey.AFK_CHANNEL_ID: ChannelId,
    AuditLogChangeKey.AFK_TIMEOUT: int,
    AuditLogChangeKey.RULES_CHANNEL_ID: ChannelId,
    AuditLogChangeKey.PUBLIC_UPDATES_CHANNEL_ID: ChannelId,
    AuditLogChangeKey.MFA_LEVEL: MFALevel,
    AuditLogChangeKey.VERIFICATION_LEVEL: VerificationLevel,
    AuditLogChangeKey.EXPLICIT_CONTENT_FILTER: ExplicitContentFilterLevel,
    AuditLogChangeKey.DEFAULT_MESSAGE_NOTIFICATIONS: DefaultMessageNotificationLevel,
    AuditLogChangeKey.VANITY_URL_CODE: str,
    AuditLogChangeKey.ROLE_ADD: list[AuditLogRole],
    AuditLogChangeKey.ROLE_REMOVE: list[AuditLogRole],
    AuditLogChangeKey.PRUNE_DELETE_DAYS: int,
    AuditLogChangeKey.WIDGET_ENABLED: bool,
    AuditLogChangeKey.WIDGET_CHANNEL_ID: ChannelId,
    AuditLogChangeKey.SYSTEM_CHANNEL_ID: ChannelId,
    AuditLogChangeKey.POSITION: int,
    AuditLogChangeKey.TOPIC: str,
    AuditLogChangeKey.BITRATE: int,
    AuditLogChangeKey.PERMISSION_OVERWRITES: list[Overwrite],
    AuditLogChangeKey.NSFW: bool,
    AuditLogChangeKey.APPLICATION_ID: ApplicationId,
    AuditLogChangeKey.RATE_LIMIT_PER_USER: int,
    AuditLogChangeKey.PERMISSIONS: Permission,
    AuditLogChangeKey.COLOR: int,
    AuditLogChangeKey.HOIST: bool,
    AuditLogChangeKey.MENTIONABLE: bool,
    AuditLogChangeKey.ALLOW: Permission,
    AuditLogChangeKey.DENY: Permission,
    AuditLogChangeKey.CODE: str,
    AuditLogChangeKey.CHANNEL_ID: ChannelId,
    AuditLogChangeKey.INVITER_ID: UserId,
    AuditLogChangeKey.MAX_USES: int,
    AuditLogChangeKey.USES: int,
    AuditLogChangeKey.MAX_AGE: int,
    AuditLogChangeKey.TEMPORARY: bool,
    AuditLogChangeKey.DEAF: bool,
    AuditLogChangeKey.MUTE: bool,
    AuditLogChangeKey.NICK: str,
    AuditLogChangeKey.AVATAR_HASH: str,
    AuditLogChangeKey.ID: AnyId,
    # ? a channel type for channels, a string for integrations
    AuditLogChangeKey.TYPE: ChannelType | str,
    AuditLogChangeKey.ENABLE_EMOTICONS: bool,
    AuditLogChangeKey.EXPIRE_BEHAVIOR: IntegrationExpireBehavior,
    AuditLogChangeKey.EXPIRE_GRACE_PERIOD: int,
    AuditLogChangeKey.USER_LIMIT: int,
    AuditLogChangeKey.PRIVACY_LEVEL: int,
}


@cache
def _adapter_for(key: AuditLogChangeKey) -> TypeAdapter:
    return TypeAdapter(CHANGE_VALUE_TYPES[key])


class AuditLogChange(RawBaseModel):
    key: AuditLogChangeKey
    new_value: Any = None
    old_value: Any = None

    def values(self) -> AuditLogValues:
        """Decode both values into the type registered for this key.

        Raises :class:`UnrecognizedValue` for keys this library does not
        know the value type of; the raw values stay on the model either way.
        """
        if not self.key.is_known or self.key not in CHANGE_VALUE_TYPES:
            raise UnrecognizedValue(self.key.to_wire(), 'audit log change key')

        adapter = _adapter_for(self.key)

        return AuditLogValues(
            old=(
                adapter.validate_python(self.old_value)
                if self.old_value is not None else
                None
            ),
            new=(
                adapter.validate_python(self.new_value)
                if self.new_value is not None else
                None
            )
        )


class AuditEntryInfo(RawBaseModel):
    # ? the counts below are sent as strings
    delete_member_days: str | None = None
    members_removed: str | None = None
    channel_id: ChannelId | None = None
    message_id: MessageId | None = None
    count: str | None = None
    id: AnyId | None = None
    type: AuditLogEntityType | None = None
    role_name: str | None = None
    application_id: ApplicationId | None = None


class AuditLogEntry(RawBaseModel):
    id: Id[AuditLogEntry]
    target_id: AnyId | None = None
    user_id: UserId | None = None
    changes: list[AuditLogChange] | None = None
    action_type: AuditLogEvent
    options: AuditEntryInfo | None = None
    reason: str | None = None


class AuditLogIntegration(RawBaseModel):
    id: IntegrationId
    name: str
    type: str
    account: IntegrationAccount
    application_id: ApplicationId | None = None


class AuditLog(RawBaseModel):
    webhooks: list[Webhook] = []
    users: list[User] = []
    audit_log_entries: list[AuditLogEntry] = []
    integrations: list[AuditLogIntegration] = []

    def get_user(self, user_id: UserId) -> User | None:
        for user in self.users:
            if user.id == user_id:
                return user

        return None


AuditLogEntryId = Id[AuditLogEntry]
