from __future__ import annotations
from discord_next.types import AnyId, Id
from typing import TYPE_CHECKING
from .base import RawBaseModel
from .enums import Permission
from .user import User

if TYPE_CHECKING:
    from .integration import Integration
    from .guild import Guild


__all__ = (
    'Role',
    'RoleId',
    'RoleTags',
)


class RoleTags(RawBaseModel):
    bot_id: Id[User] | None = None
    integration_id: Id[Integration] | None = None
    # ? sent as null when set, left out otherwise
    premium_subscriber: None = None
    subscription_listing_id: AnyId | None = None
    available_for_purchase: None = None
    guild_connections: None = None

    @property
    def is_premium_subscriber(self) -> bool:
        return 'premium_subscriber' in self.model_fields_set

    @property
    def is_available_for_purchase(self) -> bool:
        return 'available_for_purchase' in self.model_fields_set

    @property
    def is_linked(self) -> bool:
        return 'guild_connections' in self.model_fields_set


class Role(RawBaseModel):
    id: Id[Role]
    name: str
    color: int
    hoist: bool
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int
    permissions: Permission
    managed: bool
    mentionable: bool
    tags: RoleTags | None = None

    @property
    def mention(self) -> str:
        return f'<@&{self.id}>'

    @staticmethod
    def everyone_id(guild_id: Id[Guild]) -> Id[Role]:
        """The @everyone role shares its id with the guild."""
        return Id(int(guild_id))

    @property
    def is_everyone(self) -> bool:
        return self.position == 0 and self.name == '@everyone'


RoleId = Id[Role]
