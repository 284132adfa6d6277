from __future__ import annotations
from .enums import MembershipState
from discord_next.types import Id
from .base import RawBaseModel
from .image import Image
from .user import User


__all__ = (
    'Team',
    'TeamId',
    'TeamMember',
)


class TeamMember(RawBaseModel):
    membership_state: MembershipState
    permissions: list[str] = []
    team_id: Id[Team]
    user: User
    role: str | None = None


class Team(RawBaseModel):
    id: Id[Team]
    icon: str | None = None
    members: list[TeamMember] = []
    name: str | None = None
    owner_user_id: Id[User] | None = None

    @property
    def icon_image(self) -> Image | None:
        if self.icon is None:
            return None

        return Image(f'team-icons/{self.id}/{self.icon}')


TeamId = Id[Team]
