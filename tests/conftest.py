"""Shared fixtures for discord_next tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from discord_next import Config, Token


# ? the first token segment is base64 for "123"
BOT_TOKEN = 'MTIz.GAAAAA.abcdefghijklmnopqrstuvwxyz'


@pytest.fixture
def config():
    """Config for a bot token, pointed at the default api root."""
    return Config(token=Token.bot(BOT_TOKEN))


@pytest.fixture
def role_payload():
    return {
        'id': '41771983423143936',
        'name': 'WE DEM BOYZZ!!!!!!',
        'color': 3447003,
        'hoist': True,
        'position': 1,
        'permissions': '66321471',
        'managed': False,
        'mentionable': False
    }


@pytest.fixture
def user_payload():
    return {
        'id': '96008815106887111',
        'username': 'Luigi',
        'discriminator': '0002',
        'avatar': '5500909a3274e1812beb4e8de6631111',
        'public_flags': 131328
    }


@pytest.fixture
def emoji_payload(user_payload):
    return {
        'id': '41771983429993937',
        'name': 'LUL',
        'roles': ['41771983429993000', '41771983429993111'],
        'user': user_payload,
        'require_colons': True,
        'managed': False,
        'animated': False
    }


@pytest.fixture
def channel_payload():
    return {
        'id': '41771983423143937',
        'guild_id': '41771983423143936',
        'type': 0,
        'position': 6,
        'permission_overwrites': [
            {
                'id': '41771983423143936',
                'type': 0,
                'allow': '0',
                'deny': '2048'
            }
        ],
        'name': 'general',
        'topic': '24/7 chat about how to gank Mike #2',
        'nsfw': False,
        'last_message_id': '155117677105512449',
        'rate_limit_per_user': 2,
        'parent_id': None
    }


@pytest.fixture
def message_payload(user_payload):
    return {
        'id': '334385199974967042',
        'channel_id': '290926798999357250',
        'guild_id': '290926798626357250',
        'author': user_payload,
        'content': 'Supa Hot',
        'timestamp': '2017-07-11T17:27:07.299000+00:00',
        'edited_timestamp': None,
        'tts': False,
        'mention_everyone': False,
        'mentions': [],
        'mention_roles': [],
        'attachments': [],
        'embeds': [],
        'reactions': [
            {
                'count': 1,
                'me': False,
                'emoji': {'id': None, 'name': '\U0001f525'}
            }
        ],
        'pinned': False,
        'type': 0
    }


@pytest.fixture
def command_payload():
    return {
        'id': '41771983423143940',
        'application_id': '123',
        'type': 1,
        'name': 'ping',
        'description': 'replies with pong',
        'default_member_permissions': None,
        'version': '41771983423143941'
    }


def _make_session(status=200, body='', content_type='application/json'):
    response = MagicMock()
    response.status = status
    response.headers = {'content-type': content_type}
    response.text = AsyncMock(return_value=body)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    session.request = MagicMock(return_value=context)
    return session


@pytest.fixture
def make_session():
    """Factory for a mock aiohttp session whose request() yields one canned response."""
    return _make_session
