from __future__ import annotations
from .models import ApplicationCommand, ApplicationCommandId, ApplicationCommandPermission, ApplicationId, AuditLog, AuditLogEntryId, AuditLogEvent, Channel, ChannelEdit, ChannelId, EditApplicationCommand, EditGuildApplicationCommandPermissions, GuildApplicationCommandPermissions, GuildId, Message, MessageId, NewApplicationCommand, User, UserId
from aiohttp import ClientError, ClientSession, ClientTimeout
from .http import Route, exception_for, json_or_text, user_agent
from .errors import InvalidConfig, TransportError
from typing import Any, Self, TYPE_CHECKING
from urllib.parse import quote
from orjson import JSONDecodeError, dumps
from .types import Id
import logfire

if TYPE_CHECKING:
    from types import TracebackType
    from .env import Config


__all__ = (
    'Discord',
)


class Discord:
    """REST client for a single token.

    Use as an async context manager, or call :meth:`close` when done. A
    session passed in is left open for its owner to close.
    """

    def __init__(
        self,
        config: Config,
        session: ClientSession | None = None
    ) -> None:
        self.config = config
        self._session = session
        self._owns_session = session is None
        self._headers = {
            'Authorization': config.token.header,
            'User-Agent': user_agent(
                config.name,
                config.url,
                config.version
            )
        }

    async def __aenter__(self) -> Self:
        self.session  # noqa: B018
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None
    ) -> None:
        await self.close()

    @property
    def session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout)
            )
            self._owns_session = True

        return self._session

    async def close(self) -> None:
        if (
            self._owns_session and
            self._session is not None and
            not self._session.closed
        ):
            await self._session.close()

    @property
    def application_id(self) -> ApplicationId:
        application_id = self.config.token.application_id

        if application_id is None:
            raise InvalidConfig(
                'application id cannot be read from this token, pass it explicitly')

        return Id(application_id)

    def _application_id_or_default(
        self,
        application_id: ApplicationId | None
    ) -> ApplicationId:
        return self.application_id if application_id is None else application_id

    async def request(
        self,
        route: Route,
        *,
        json: dict[str, Any] | list[Any] | None = None,
        params: dict[str, Any] | None = None,
        reason: str | None = None
    ) -> Any:  # noqa: ANN401
        headers = self._headers.copy()
        data: bytes | None = None

        if json is not None:
            headers['Content-Type'] = 'application/json'
            data = dumps(json)

        if reason:
            headers['X-Audit-Log-Reason'] = quote(reason, safe='/ ')

        query = {
            key: str(value)
            for key, value in (params or {}).items()
            if value is not None
        }

        with logfire.span(
            '{method} {path}',
            method=route.method,
            path=route.path,
            url=route.url
        ):
            try:
                async with self.session.request(
                    route.method,
                    self.config.api_root + route.url,
                    data=data,
                    headers=headers,
                    params=query or None
                ) as response:
                    resp_data = await json_or_text(response)

                    if 300 > response.status >= 200:
                        return resp_data

                    logfire.warn(
                        'discord responded with {status} to {method} {path}',
                        status=response.status,
                        method=route.method,
                        path=route.path,
                        response=resp_data
                    )

                    raise exception_for(response.status, resp_data)
            except (ClientError, TimeoutError, JSONDecodeError) as e:
                raise TransportError(
                    f'{route.method} {route.path} failed: {e!r}') from e

    # ? global application commands

    async def get_global_application_commands(
        self,
        application_id: ApplicationId | None = None
    ) -> list[ApplicationCommand]:
        return [
            ApplicationCommand.model_validate(command)
            for command in await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/commands',
                    application_id=self._application_id_or_default(application_id)
                )
            )
        ]

    async def get_global_application_command(
        self,
        command_id: ApplicationCommandId,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/commands/{command_id}',
                    application_id=self._application_id_or_default(application_id),
                    command_id=command_id
                )
            )
        )

    async def create_global_application_command(
        self,
        command: NewApplicationCommand,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'POST',
                    '/applications/{application_id}/commands',
                    application_id=self._application_id_or_default(application_id)
                ),
                json=command.as_payload()
            )
        )

    async def edit_global_application_command(
        self,
        command_id: ApplicationCommandId,
        edit: EditApplicationCommand,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'PATCH',
                    '/applications/{application_id}/commands/{command_id}',
                    application_id=self._application_id_or_default(application_id),
                    command_id=command_id
                ),
                json=edit.as_payload()
            )
        )

    async def delete_global_application_command(
        self,
        command_id: ApplicationCommandId,
        application_id: ApplicationId | None = None
    ) -> None:
        await self.request(
            Route(
                'DELETE',
                '/applications/{application_id}/commands/{command_id}',
                application_id=self._application_id_or_default(application_id),
                command_id=command_id
            )
        )

    async def bulk_overwrite_global_application_commands(
        self,
        commands: list[NewApplicationCommand],
        application_id: ApplicationId | None = None
    ) -> list[ApplicationCommand]:
        return [
            ApplicationCommand.model_validate(command)
            for command in await self.request(
                Route(
                    'PUT',
                    '/applications/{application_id}/commands',
                    application_id=self._application_id_or_default(application_id)
                ),
                json=[command.as_payload() for command in commands]
            )
        ]

    # ? guild application commands

    async def get_guild_application_commands(
        self,
        guild_id: GuildId,
        application_id: ApplicationId | None = None
    ) -> list[ApplicationCommand]:
        return [
            ApplicationCommand.model_validate(command)
            for command in await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/guilds/{guild_id}/commands',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id
                )
            )
        ]

    async def get_guild_application_command(
        self,
        guild_id: GuildId,
        command_id: ApplicationCommandId,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id,
                    command_id=command_id
                )
            )
        )

    async def create_guild_application_command(
        self,
        guild_id: GuildId,
        command: NewApplicationCommand,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'POST',
                    '/applications/{application_id}/guilds/{guild_id}/commands',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id
                ),
                json=command.as_payload()
            )
        )

    async def edit_guild_application_command(
        self,
        guild_id: GuildId,
        command_id: ApplicationCommandId,
        edit: EditApplicationCommand,
        application_id: ApplicationId | None = None
    ) -> ApplicationCommand:
        return ApplicationCommand.model_validate(
            await self.request(
                Route(
                    'PATCH',
                    '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id,
                    command_id=command_id
                ),
                json=edit.as_payload()
            )
        )

    async def delete_guild_application_command(
        self,
        guild_id: GuildId,
        command_id: ApplicationCommandId,
        application_id: ApplicationId | None = None
    ) -> None:
        await self.request(
            Route(
                'DELETE',
                '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}',
                application_id=self._application_id_or_default(application_id),
                guild_id=guild_id,
                command_id=command_id
            )
        )

    async def bulk_overwrite_guild_application_commands(
        self,
        guild_id: GuildId,
        commands: list[NewApplicationCommand],
        application_id: ApplicationId | None = None
    ) -> list[ApplicationCommand]:
        return [
            ApplicationCommand.model_validate(command)
            for command in await self.request(
                Route(
                    'PUT',
                    '/applications/{application_id}/guilds/{guild_id}/commands',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id
                ),
                json=[command.as_payload() for command in commands]
            )
        ]

    # ? application command permissions

    async def get_guild_application_command_permissions(
        self,
        guild_id: GuildId,
        application_id: ApplicationId | None = None
    ) -> list[GuildApplicationCommandPermissions]:
        return [
            GuildApplicationCommandPermissions.model_validate(permissions)
            for permissions in await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/guilds/{guild_id}/commands/permissions',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id
                )
            )
        ]

    async def get_application_command_permissions(
        self,
        guild_id: GuildId,
        command_id: ApplicationCommandId,
        application_id: ApplicationId | None = None
    ) -> GuildApplicationCommandPermissions:
        return GuildApplicationCommandPermissions.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}/permissions',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id,
                    command_id=command_id
                )
            )
        )

    async def edit_application_command_permissions(
        self,
        guild_id: GuildId,
        command_id: ApplicationCommandId,
        permissions: list[ApplicationCommandPermission],
        application_id: ApplicationId | None = None
    ) -> GuildApplicationCommandPermissions:
        return GuildApplicationCommandPermissions.model_validate(
            await self.request(
                Route(
                    'PUT',
                    '/applications/{application_id}/guilds/{guild_id}/commands/{command_id}/permissions',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id,
                    command_id=command_id
                ),
                json={
                    'permissions': [
                        permission.as_payload()
                        for permission in permissions
                    ]
                }
            )
        )

    async def batch_edit_application_command_permissions(
        self,
        guild_id: GuildId,
        command_permissions: list[EditGuildApplicationCommandPermissions],
        application_id: ApplicationId | None = None
    ) -> list[GuildApplicationCommandPermissions]:
        return [
            GuildApplicationCommandPermissions.model_validate(permissions)
            for permissions in await self.request(
                Route(
                    'PUT',
                    '/applications/{application_id}/guilds/{guild_id}/commands/permissions',
                    application_id=self._application_id_or_default(application_id),
                    guild_id=guild_id
                ),
                json=[
                    permissions.as_payload()
                    for permissions in command_permissions
                ]
            )
        ]

    # ? audit log

    async def get_guild_audit_log(
        self,
        guild_id: GuildId,
        *,
        user_id: UserId | None = None,
        action_type: AuditLogEvent | None = None,
        before: AuditLogEntryId | None = None,
        limit: int | None = None
    ) -> AuditLog:
        return AuditLog.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/guilds/{guild_id}/audit-logs',
                    guild_id=guild_id
                ),
                params={
                    'user_id': user_id,
                    'action_type': (
                        action_type.to_wire()
                        if action_type is not None else
                        None
                    ),
                    'before': before,
                    'limit': limit
                }
            )
        )

    # ? users

    async def get_current_user(self) -> User:
        return User.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/users/@me'
                )
            )
        )

    # ? channels

    async def get_channel(
        self,
        channel_id: ChannelId
    ) -> Channel:
        return Channel.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/channels/{channel_id}',
                    channel_id=channel_id
                )
            )
        )

    async def modify_channel(
        self,
        channel_id: ChannelId,
        edit: ChannelEdit,
        *,
        reason: str | None = None
    ) -> Channel:
        return Channel.model_validate(
            await self.request(
                Route(
                    'PATCH',
                    '/channels/{channel_id}',
                    channel_id=channel_id
                ),
                json=edit.as_payload(),
                reason=reason
            )
        )

    async def get_channel_message(
        self,
        channel_id: ChannelId,
        message_id: MessageId
    ) -> Message:
        return Message.model_validate(
            await self.request(
                Route(
                    'GET',
                    '/channels/{channel_id}/messages/{message_id}',
                    channel_id=channel_id,
                    message_id=message_id
                )
            )
        )
