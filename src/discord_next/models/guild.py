from __future__ import annotations
from .enums import Permission, VerificationLevel, DefaultMessageNotificationLevel, ExplicitContentFilterLevel, GuildFeature, MFALevel, SystemChannelFlag, PremiumTier, NSFWLevel
from .application import ApplicationId
from discord_next.types import Id
from typing import TYPE_CHECKING
from .base import RawBaseModel
from datetime import datetime
from .emoji import Emoji, EmojiId
from .role import Role, RoleId
from .user import User, UserId
from .image import Image

if TYPE_CHECKING:
    from .channel import Channel


__all__ = (
    'Guild',
    'GuildId',
    'Member',
    'WelcomeScreen',
    'WelcomeScreenChannel',
)


class WelcomeScreenChannel(RawBaseModel):
    channel_id: Id[Channel]
    description: str
    emoji_id: EmojiId | None = None
    emoji_name: str | None = None


class WelcomeScreen(RawBaseModel):
    description: str | None = None
    welcome_channels: list[WelcomeScreenChannel]


class Member(RawBaseModel):
    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[RoleId]
    joined_at: datetime
    premium_since: datetime | None = None
    deaf: bool | None = None
    mute: bool | None = None
    pending: bool | None = None
    permissions: Permission | None = None
    communication_disabled_until: datetime | None = None


class Guild(RawBaseModel):
    id: Id[Guild]
    name: str
    icon: str | None = None
    icon_hash: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    owner: bool | None = None
    owner_id: UserId
    permissions: Permission | None = None
    region: str | None = None  # deprecated
    afk_channel_id: Id[Channel] | None = None
    afk_timeout: int
    widget_enabled: bool | None = None
    widget_channel_id: Id[Channel] | None = None
    verification_level: VerificationLevel
    default_message_notifications: DefaultMessageNotificationLevel
    explicit_content_filter: ExplicitContentFilterLevel
    roles: list[Role] = []
    emojis: list[Emoji] = []
    features: list[GuildFeature] = []
    mfa_level: MFALevel
    application_id: ApplicationId | None = None
    system_channel_id: Id[Channel] | None = None
    system_channel_flags: SystemChannelFlag
    rules_channel_id: Id[Channel] | None = None
    joined_at: datetime | None = None
    large: bool | None = None
    member_count: int | None = None
    members: list[Member] | None = None
    max_presences: int | None = None
    max_members: int | None = None
    vanity_url_code: str | None = None
    description: str | None = None
    banner: str | None = None
    premium_tier: PremiumTier
    premium_subscription_count: int | None = None
    preferred_locale: str
    public_updates_channel_id: Id[Channel] | None = None
    max_video_channel_users: int | None = None
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None
    welcome_screen: WelcomeScreen | None = None
    nsfw: bool | None = None
    nsfw_level: NSFWLevel | None = None
    premium_progress_bar_enabled: bool | None = None

    @property
    def everyone_role_id(self) -> RoleId:
        return Role.everyone_id(self.id)

    @property
    def everyone_role(self) -> Role | None:
        everyone_id = self.everyone_role_id

        for role in self.roles:
            if role.id == everyone_id:
                return role

        return None

    @property
    def icon_image(self) -> Image | None:
        if self.icon is None:
            return None

        return Image.from_hash('icons', self.id, self.icon)

    @property
    def banner_image(self) -> Image | None:
        if self.banner is None:
            return None

        return Image.from_hash('banners', self.id, self.banner)

    @property
    def splash_image(self) -> Image | None:
        if self.splash is None:
            return None

        return Image(f'splashes/{self.id}/{self.splash}')

    def has_feature(self, feature: GuildFeature) -> bool:
        return feature in self.features


GuildId = Id[Guild]
