"""Tests for the REST client against a mocked aiohttp session."""

from unittest.mock import patch

import pytest
from aiohttp import ClientConnectionError
from orjson import dumps, loads

from discord_next import Discord, Forbidden, HTTPException, Id, InvalidConfig, NotFound, ServerError, Token, TransportError, Unauthorized
from discord_next.http import Route
from discord_next.models import (
    ApplicationCommandPermission,
    AuditLogEvent,
    ChannelEdit,
    EditApplicationCommand,
    EditGuildApplicationCommandPermissions,
    NewApplicationCommand,
)


API = 'https://discord.com/api/v10'


@pytest.fixture(autouse=True)
def mock_logfire():
    with patch('discord_next.client.logfire') as logfire:
        yield logfire


def sent(session):
    """The method, url, decoded json body and keyword arguments of the last request."""
    args, kwargs = session.request.call_args
    body = loads(kwargs['data']) if kwargs['data'] is not None else None
    return args[0], args[1], body, kwargs


class TestRequest:
    @pytest.mark.asyncio
    async def test_sends_auth_and_user_agent(self, config, make_session):
        session = make_session(body='{}')
        client = Discord(config, session)

        await client.request(Route('GET', '/users/@me'))

        _, url, body, kwargs = sent(session)
        assert url == f'{API}/users/@me'
        assert body is None
        assert kwargs['headers']['Authorization'].startswith('Bot ')
        assert kwargs['headers']['User-Agent'].startswith(
            'DiscordBot (https://pypi.org/project/discord-next, 0.1.0)')
        assert 'Content-Type' not in kwargs['headers']

    @pytest.mark.asyncio
    async def test_json_body(self, config, make_session):
        session = make_session(body='{}')
        client = Discord(config, session)

        await client.request(Route('POST', '/test'), json={'a': 1})

        _, _, body, kwargs = sent(session)
        assert body == {'a': 1}
        assert kwargs['headers']['Content-Type'] == 'application/json'

    @pytest.mark.asyncio
    async def test_audit_log_reason_is_quoted(self, config, make_session):
        session = make_session(body='{}')
        client = Discord(config, session)

        await client.request(Route('PATCH', '/test'), reason='spam / abuse?')

        _, _, _, kwargs = sent(session)
        assert kwargs['headers']['X-Audit-Log-Reason'] == 'spam / abuse%3F'

    @pytest.mark.asyncio
    async def test_empty_response_is_none(self, config, make_session):
        client = Discord(config, make_session(status=204, body=''))
        assert await client.request(Route('DELETE', '/test')) is None

    @pytest.mark.asyncio
    async def test_text_response(self, config, make_session):
        client = Discord(config, make_session(body='ok', content_type='text/plain'))
        assert await client.request(Route('GET', '/test')) == 'ok'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status, exception', [
        (401, Unauthorized),
        (403, Forbidden),
        (404, NotFound),
        (500, ServerError),
        (502, ServerError),
        (400, HTTPException),
    ])
    async def test_error_statuses(self, config, make_session, mock_logfire, status, exception):
        session = make_session(
            status=status,
            body=dumps({'message': 'nope', 'code': 10003}).decode()
        )
        client = Discord(config, session)

        with pytest.raises(exception) as exc_info:
            await client.request(Route('GET', '/test'))

        assert exc_info.value.status_code == status
        assert exc_info.value.message == 'nope'
        assert exc_info.value.code == 10003
        mock_logfire.warn.assert_called_once()

    @pytest.mark.asyncio
    async def test_connection_errors_become_transport_errors(self, config, make_session):
        session = make_session()
        session.request.side_effect = ClientConnectionError('connection reset')
        client = Discord(config, session)

        with pytest.raises(TransportError):
            await client.request(Route('GET', '/test'))

    @pytest.mark.asyncio
    async def test_timeouts_become_transport_errors(self, config, make_session):
        session = make_session()
        session.request.side_effect = TimeoutError()
        client = Discord(config, session)

        with pytest.raises(TransportError):
            await client.request(Route('GET', '/test'))

    @pytest.mark.asyncio
    async def test_malformed_json_becomes_a_transport_error(self, config, make_session):
        client = Discord(config, make_session(body='not json'))

        with pytest.raises(TransportError):
            await client.request(Route('GET', '/test'))

    @pytest.mark.asyncio
    async def test_request_is_traced(self, config, make_session, mock_logfire):
        client = Discord(config, make_session(body='{}'))

        await client.request(Route('GET', '/channels/{channel_id}', channel_id=1))

        mock_logfire.span.assert_called_once_with(
            '{method} {path}',
            method='GET',
            path='/channels/{channel_id}',
            url='/channels/1'
        )


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_borrowed_session_is_left_open(self, config, make_session):
        session = make_session()

        async with Discord(config, session):
            pass

        session.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self, config):
        async with Discord(config) as client:
            session = client.session
            assert not session.closed

        assert session.closed

    def test_application_id_from_token(self, config):
        assert Discord(config).application_id == 123

    def test_application_id_needs_a_bot_token(self, config):
        client = Discord(config.model_copy(update={'token': Token.bearer('abc')}))

        with pytest.raises(InvalidConfig):
            client.application_id

    @pytest.mark.asyncio
    async def test_explicit_zero_application_id_is_used(self, config, make_session):
        session = make_session(body='[]')
        client = Discord(config.model_copy(update={'token': Token.bearer('abc')}), session)

        assert await client.get_global_application_commands(Id(0)) == []

        _, url, _, _ = sent(session)
        assert url == f'{API}/applications/0/commands'


class TestEndpoints:
    @pytest.mark.asyncio
    async def test_get_global_application_commands(self, config, make_session, command_payload):
        session = make_session(body=dumps([command_payload]).decode())
        client = Discord(config, session)

        commands = await client.get_global_application_commands()

        method, url, _, _ = sent(session)
        assert method == 'GET'
        assert url == f'{API}/applications/123/commands'
        assert commands[0].name == 'ping'

    @pytest.mark.asyncio
    async def test_create_global_application_command(self, config, make_session, command_payload):
        session = make_session(body=dumps(command_payload).decode())
        client = Discord(config, session)

        command = await client.create_global_application_command(
            NewApplicationCommand(name='ping', description='replies with pong'),
            application_id=Id(456)
        )

        method, url, body, _ = sent(session)
        assert method == 'POST'
        assert url == f'{API}/applications/456/commands'
        assert body == {'name': 'ping', 'description': 'replies with pong'}
        assert command.id == 41771983423143940

    @pytest.mark.asyncio
    async def test_edit_guild_application_command(self, config, make_session, command_payload):
        session = make_session(body=dumps(command_payload).decode())
        client = Discord(config, session)

        await client.edit_guild_application_command(
            Id(7),
            Id(41771983423143940),
            EditApplicationCommand(description='new description')
        )

        method, url, body, _ = sent(session)
        assert method == 'PATCH'
        assert url == f'{API}/applications/123/guilds/7/commands/41771983423143940'
        assert body == {'description': 'new description'}

    @pytest.mark.asyncio
    async def test_delete_global_application_command(self, config, make_session):
        session = make_session(status=204)
        client = Discord(config, session)

        assert await client.delete_global_application_command(Id(9)) is None

        method, url, _, _ = sent(session)
        assert method == 'DELETE'
        assert url == f'{API}/applications/123/commands/9'

    @pytest.mark.asyncio
    async def test_bulk_overwrite_guild_application_commands(self, config, make_session, command_payload):
        session = make_session(body=dumps([command_payload]).decode())
        client = Discord(config, session)

        commands = await client.bulk_overwrite_guild_application_commands(
            Id(7),
            [NewApplicationCommand(name='ping', description='replies with pong')]
        )

        method, url, body, _ = sent(session)
        assert method == 'PUT'
        assert url == f'{API}/applications/123/guilds/7/commands'
        assert body == [{'name': 'ping', 'description': 'replies with pong'}]
        assert len(commands) == 1

    @pytest.mark.asyncio
    async def test_edit_application_command_permissions(self, config, make_session):
        response = {
            'id': '9',
            'application_id': '123',
            'guild_id': '7',
            'permissions': [{'id': '5', 'type': 2, 'permission': False}]
        }
        session = make_session(body=dumps(response).decode())
        client = Discord(config, session)

        permissions = await client.edit_application_command_permissions(
            Id(7),
            Id(9),
            [ApplicationCommandPermission.for_user(Id(5), False)]
        )

        method, url, body, _ = sent(session)
        assert method == 'PUT'
        assert url == f'{API}/applications/123/guilds/7/commands/9/permissions'
        assert body == {'permissions': [{'id': '5', 'type': 2, 'permission': False}]}
        assert permissions.permissions[0].id == 5

    @pytest.mark.asyncio
    async def test_batch_edit_application_command_permissions(self, config, make_session):
        session = make_session(body='[]')
        client = Discord(config, session)

        await client.batch_edit_application_command_permissions(
            Id(7),
            [
                EditGuildApplicationCommandPermissions(
                    id=Id(9),
                    permissions=[ApplicationCommandPermission.for_role(Id(3), True)]
                )
            ]
        )

        _, url, body, _ = sent(session)
        assert url == f'{API}/applications/123/guilds/7/commands/permissions'
        assert body == [
            {'id': '9', 'permissions': [{'id': '3', 'type': 1, 'permission': True}]}
        ]

    @pytest.mark.asyncio
    async def test_get_guild_audit_log(self, config, make_session):
        session = make_session(body='{"audit_log_entries": []}')
        client = Discord(config, session)

        audit_log = await client.get_guild_audit_log(
            Id(7),
            action_type=AuditLogEvent.ROLE_UPDATE,
            limit=10
        )

        _, url, _, kwargs = sent(session)
        assert url == f'{API}/guilds/7/audit-logs'
        assert kwargs['params'] == {'action_type': '31', 'limit': '10'}
        assert audit_log.audit_log_entries == []

    @pytest.mark.asyncio
    async def test_get_guild_audit_log_without_filters(self, config, make_session):
        session = make_session(body='{}')
        client = Discord(config, session)

        await client.get_guild_audit_log(Id(7))

        _, _, _, kwargs = sent(session)
        assert kwargs['params'] is None

    @pytest.mark.asyncio
    async def test_get_current_user(self, config, make_session, user_payload):
        session = make_session(body=dumps(user_payload).decode())
        client = Discord(config, session)

        user = await client.get_current_user()

        assert user.username == 'Luigi'
        assert sent(session)[1] == f'{API}/users/@me'

    @pytest.mark.asyncio
    async def test_modify_channel(self, config, make_session, channel_payload):
        session = make_session(body=dumps(channel_payload).decode())
        client = Discord(config, session)

        channel = await client.modify_channel(
            Id(41771983423143937),
            ChannelEdit(name='general', topic=None),
            reason='tidy up'
        )

        method, url, body, kwargs = sent(session)
        assert method == 'PATCH'
        assert url == f'{API}/channels/41771983423143937'
        assert body == {'name': 'general', 'topic': None}
        assert kwargs['headers']['X-Audit-Log-Reason'] == 'tidy up'
        assert channel.name == 'general'

    @pytest.mark.asyncio
    async def test_get_channel_message(self, config, make_session, message_payload):
        session = make_session(body=dumps(message_payload).decode())
        client = Discord(config, session)

        message = await client.get_channel_message(
            Id(290926798999357250),
            Id(334385199974967042)
        )

        assert sent(session)[1] == (
            f'{API}/channels/290926798999357250/messages/334385199974967042')
        assert message.content == 'Supa Hot'

    @pytest.mark.asyncio
    async def test_missing_resource(self, config, make_session):
        client = Discord(config, make_session(
            status=404,
            body='{"message": "Unknown Channel", "code": 10003}'
        ))

        with pytest.raises(NotFound):
            await client.get_channel(Id(1))
