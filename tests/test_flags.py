"""Tests for bit flag sets, including bits no flag is named for."""

import pytest
from pydantic import BaseModel

from discord_next import TypeMismatch, UnrecognizedValue
from discord_next.models import MessageFlag, Permission, UserFlag


U64_MAX = (1 << 64) - 1


class TestBitFlags:
    def test_unknown_bits_are_kept(self):
        flags = UserFlag.from_wire((1 << 50) | 1)

        assert UserFlag.STAFF in flags
        assert flags.unknown_bits == 1 << 50
        assert not flags.is_known
        assert flags.to_wire() == (1 << 50) | 1

    def test_from_bits_rejects_unknown_bits(self):
        with pytest.raises(UnrecognizedValue):
            UserFlag.from_bits(1 << 50)

        assert UserFlag.from_bits(1) is UserFlag.STAFF

    def test_from_bits_truncate_drops_unknown_bits(self):
        flags = UserFlag.from_bits_truncate((1 << 50) | 1)

        assert flags == UserFlag.STAFF
        assert flags.is_known

    def test_all_contains_every_named_flag(self):
        everything = MessageFlag.all()

        for flag in MessageFlag:
            assert flag in everything

        assert everything.is_known

    def test_invert_covers_all_64_bits(self):
        assert (~UserFlag.NONE).to_wire() == U64_MAX
        assert ~~UserFlag.STAFF == UserFlag.STAFF

    def test_invert_keeps_unknown_bits(self):
        flags = UserFlag.from_wire((1 << 40) | 1)

        assert (~~flags).to_wire() == (1 << 40) | 1
        assert (~Permission.NONE).to_wire() == str(U64_MAX)

    def test_decoding_does_not_grow_the_member_map(self):
        before = len(UserFlag._value2member_map_)

        for bit in range(41, 64):
            UserFlag.from_wire((1 << bit) | 1)
            UserFlag.STAFF | UserFlag.PARTNER

        assert len(UserFlag._value2member_map_) == before

    def test_operators(self):
        flags = UserFlag.STAFF | UserFlag.PARTNER

        assert flags & UserFlag.PARTNER == UserFlag.PARTNER
        assert flags ^ UserFlag.STAFF == UserFlag.PARTNER
        assert flags & ~UserFlag.STAFF == UserFlag.PARTNER

    def test_known_returns_self(self):
        flags = UserFlag.STAFF | UserFlag.PARTNER
        assert flags.known() == flags

    @pytest.mark.parametrize('value', ['1', 1.0, True, None, -1, 1 << 64])
    def test_rejects_wrong_wire_kind(self, value):
        with pytest.raises(TypeMismatch):
            UserFlag.from_wire(value)


class TestPermission:
    """Permissions travel as decimal strings."""

    def test_decodes_decimal_strings(self):
        permissions = Permission.from_wire('66321471')

        assert Permission.ADMINISTRATOR in permissions
        assert Permission.MANAGE_ROLES not in permissions
        assert permissions.to_wire() == '66321471'

    def test_accepts_integers(self):
        assert Permission.from_wire(8) == Permission.ADMINISTRATOR

    def test_unknown_bits_survive(self):
        permissions = Permission.from_wire(str(1 << 60))

        assert not permissions.is_known
        assert permissions.to_wire() == str(1 << 60)

    @pytest.mark.parametrize('value', ['', '-8', '8.0', ' 8', str(1 << 64)])
    def test_rejects_invalid_strings(self, value):
        with pytest.raises(TypeMismatch):
            Permission.from_wire(value)

    def test_with_overwrite(self):
        base = Permission.VIEW_CHANNEL | Permission.SEND_MESSAGES
        result = base.with_overwrite(
            allow=Permission.ATTACH_FILES,
            deny=Permission.SEND_MESSAGES
        )

        assert result == Permission.VIEW_CHANNEL | Permission.ATTACH_FILES

    def test_serializes_as_string_in_models(self):
        class Holder(BaseModel):
            permissions: Permission

        holder = Holder.model_validate({'permissions': '2048'})

        assert holder.permissions is Permission.SEND_MESSAGES
        assert holder.model_dump(mode='json') == {'permissions': '2048'}
