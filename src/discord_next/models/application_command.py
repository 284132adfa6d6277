from __future__ import annotations
from .enums import ApplicationCommandType, ApplicationCommandOptionType, ApplicationCommandPermissionType, ChannelType, Permission
from .base import RawBaseModel, RequestModel
from discord_next.types import AnyId, Id
from .application import ApplicationId
from .channel import Channel
from pydantic import Field
from .guild import GuildId
from .role import Role
from .user import User


__all__ = (
    'ApplicationCommand',
    'ApplicationCommandId',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    'ApplicationCommandPermission',
    'EditApplicationCommand',
    'EditGuildApplicationCommandPermissions',
    'GuildApplicationCommandPermissions',
    'NewApplicationCommand',
)


COMMAND_NAME_PATTERN = r'^[-_\p{L}\p{N}\p{sc=Deva}\p{sc=Thai}]{1,32}$'


class ApplicationCommandOptionChoice(RawBaseModel):
    name: str
    name_localizations: dict[str, str] | None = None
    value: str | int | float


class ApplicationCommandOption(RawBaseModel):
    type: ApplicationCommandOptionType
    name: str = Field(pattern=COMMAND_NAME_PATTERN)
    name_localizations: dict[str, str] | None = None
    description: str = Field(max_length=100)
    description_localizations: dict[str, str] | None = None
    required: bool = False
    choices: list[ApplicationCommandOptionChoice] | None = None
    options: list[ApplicationCommandOption] | None = None
    channel_types: list[ChannelType] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool | None = None


class ApplicationCommand(RawBaseModel):
    id: Id[ApplicationCommand]
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: ApplicationId
    guild_id: GuildId | None = None
    name: str
    name_localizations: dict[str, str] | None = None
    description: str
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: Permission | None = None
    # ? deprecated in favor of default_member_permissions
    default_permission: bool | None = None
    nsfw: bool | None = None
    version: AnyId

    @property
    def mention(self) -> str:
        return f'</{self.name}:{self.id}>'


class NewApplicationCommand(RequestModel):
    name: str = Field(pattern=COMMAND_NAME_PATTERN)
    name_localizations: dict[str, str] | None = None
    description: str = Field(max_length=100)
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: Permission | None = None
    default_permission: bool | None = None
    type: ApplicationCommandType | None = None
    nsfw: bool | None = None


class EditApplicationCommand(RequestModel):
    name: str | None = Field(None, pattern=COMMAND_NAME_PATTERN)
    name_localizations: dict[str, str] | None = None
    description: str | None = Field(None, max_length=100)
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: Permission | None = None
    default_permission: bool | None = None
    nsfw: bool | None = None


class ApplicationCommandPermission(RawBaseModel):
    # ? a role, user or channel id, depending on type
    id: AnyId
    type: ApplicationCommandPermissionType
    permission: bool

    @classmethod
    def for_role(cls, role_id: Id[Role], permission: bool) -> ApplicationCommandPermission:
        return cls(
            id=role_id.erase(),
            type=ApplicationCommandPermissionType.ROLE,
            permission=permission)

    @classmethod
    def for_user(cls, user_id: Id[User], permission: bool) -> ApplicationCommandPermission:
        return cls(
            id=user_id.erase(),
            type=ApplicationCommandPermissionType.USER,
            permission=permission)

    @classmethod
    def for_channel(cls, channel_id: Id[Channel], permission: bool) -> ApplicationCommandPermission:
        return cls(
            id=channel_id.erase(),
            type=ApplicationCommandPermissionType.CHANNEL,
            permission=permission)


class GuildApplicationCommandPermissions(RawBaseModel):
    # ? the application id when the permissions apply to every command
    id: AnyId
    application_id: ApplicationId
    guild_id: GuildId
    permissions: list[ApplicationCommandPermission]


class EditGuildApplicationCommandPermissions(RequestModel):
    id: Id[ApplicationCommand]
    permissions: list[ApplicationCommandPermission]


ApplicationCommandId = Id[ApplicationCommand]
