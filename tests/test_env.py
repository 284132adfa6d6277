"""Tests for tokens and client configuration."""

from unittest.mock import patch

import pytest

from discord_next import Config, InvalidConfig, Token


class TestToken:
    def test_header(self):
        assert Token.bot('abc').header == 'Bot abc'
        assert Token.bearer('abc').header == 'Bearer abc'

    def test_secret_is_hidden(self):
        token = Token.bot('super secret')

        assert 'super secret' not in repr(token)
        assert 'super secret' not in str(token)
        assert repr(token) == 'Token.bot(**********)'

    def test_application_id(self):
        assert Token.bot('MTIz.GAAAAA.abc').application_id == 123

    def test_application_id_of_bearer_token(self):
        assert Token.bearer('MTIz.GAAAAA.abc').application_id is None

    def test_application_id_of_garbage(self):
        assert Token.bot('not a token').application_id is None


class TestConfig:
    def test_defaults(self):
        config = Config(token=Token.bot('abc'))

        assert config.api_root == 'https://discord.com/api/v10'
        assert config.timeout == 30.0
        assert config.dev is False

    def test_api_root_trailing_slash(self):
        config = Config(token=Token.bot('abc'), api_root='http://localhost:8080/api/')
        assert config.api_root == 'http://localhost:8080/api'

    @pytest.mark.parametrize('overrides', [
        {'api_root': 'ftp://discord.com'},
        {'timeout': 0},
        {'timeout': -1},
        {'token': 'abc'},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(InvalidConfig):
            Config(**({'token': Token.bot('abc')} | overrides))

    def test_missing_token(self):
        with pytest.raises(InvalidConfig):
            Config()


class TestFromEnv:
    def test_bot_token(self):
        with patch.dict('os.environ', {'DISCORD_TOKEN': 'abc'}, clear=True):
            config = Config.from_env()

        assert config.token.kind == 'Bot'
        assert config.dev is False

    def test_bearer_token(self):
        with patch.dict('os.environ', {'DISCORD_BEARER_TOKEN': 'abc'}, clear=True):
            assert Config.from_env().token.kind == 'Bearer'

    def test_no_token(self):
        with patch.dict('os.environ', {}, clear=True):
            with pytest.raises(InvalidConfig):
                Config.from_env()

    def test_reads_optional_settings(self):
        env = {
            'DISCORD_TOKEN': 'abc',
            'DISCORD_API_ROOT': 'http://localhost:8080/api/v10',
            'DISCORD_TIMEOUT': '5',
            'LOGFIRE_TOKEN': 'logfire',
            'DEV': '1'
        }

        with patch.dict('os.environ', env, clear=True):
            config = Config.from_env()

        assert config.api_root == 'http://localhost:8080/api/v10'
        assert config.timeout == 5.0
        assert config.logfire_token == 'logfire'
        assert config.dev is True

    def test_overrides_win(self):
        with patch.dict('os.environ', {'DISCORD_TOKEN': 'abc', 'DISCORD_TIMEOUT': '5'}, clear=True):
            assert Config.from_env(timeout=10).timeout == 10.0

    def test_invalid_timeout(self):
        with patch.dict('os.environ', {'DISCORD_TOKEN': 'abc', 'DISCORD_TIMEOUT': 'soon'}, clear=True):
            with pytest.raises(InvalidConfig):
                Config.from_env()
