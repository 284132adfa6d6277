from __future__ import annotations
from .enums import IntegrationExpireBehavior
from discord_next.types import AnyId, Id
from .base import RawBaseModel
from datetime import datetime
from .role import RoleId
from .user import User


__all__ = (
    'Integration',
    'IntegrationAccount',
    'IntegrationApplication',
    'IntegrationId',
)


class IntegrationAccount(RawBaseModel):
    # ? twitch and youtube account ids are not snowflakes
    id: str
    name: str


class IntegrationApplication(RawBaseModel):
    id: AnyId
    name: str
    icon: str | None = None
    description: str
    summary: str | None = None
    bot: User | None = None


class Integration(RawBaseModel):
    id: Id[Integration]
    name: str
    type: str
    enabled: bool
    syncing: bool | None = None
    role_id: RoleId | None = None
    enable_emoticons: bool | None = None
    expire_behavior: IntegrationExpireBehavior | None = None
    expire_grace_period: int | None = None
    user: User | None = None
    account: IntegrationAccount
    synced_at: datetime | None = None
    subscriber_count: int | None = None
    revoked: bool | None = None
    application: IntegrationApplication | None = None
    scopes: list[str] | None = None


IntegrationId = Id[Integration]
