from __future__ import annotations
from discord_next.types import AnyId, Id
from typing import TYPE_CHECKING
from .enums import ApplicationFlag
from .base import RawBaseModel
from .image import Image
from .team import Team
from .user import User

if TYPE_CHECKING:
    from .guild import Guild


__all__ = (
    'Application',
    'ApplicationId',
)


class Application(RawBaseModel):
    id: Id[Application]
    name: str
    icon: str | None = None
    description: str
    rpc_origins: list[str] | None = None
    bot_public: bool
    bot_require_code_grant: bool
    bot: User | None = None
    terms_of_service_url: str | None = None
    privacy_policy_url: str | None = None
    owner: User | None = None
    summary: str | None = None
    verify_key: str
    team: Team | None = None
    guild_id: Id[Guild] | None = None
    # ? skus are not modeled
    primary_sku_id: AnyId | None = None
    slug: str | None = None
    cover_image: str | None = None
    flags: ApplicationFlag | None = None
    approximate_guild_count: int | None = None
    redirect_uris: list[str] | None = None
    interactions_endpoint_url: str | None = None
    tags: list[str] | None = None
    custom_install_url: str | None = None

    @property
    def icon_image(self) -> Image | None:
        if self.icon is None:
            return None

        return Image(f'app-icons/{self.id}/{self.icon}')

    @property
    def cover_image_image(self) -> Image | None:
        if self.cover_image is None:
            return None

        return Image(f'app-icons/{self.id}/{self.cover_image}')


ApplicationId = Id[Application]
