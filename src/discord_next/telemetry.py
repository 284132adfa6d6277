from __future__ import annotations
from typing import TYPE_CHECKING
import logfire

if TYPE_CHECKING:
    from .env import Config


__all__ = (
    'configure',
)


def configure(config: Config, *, instrument: bool = True) -> None:
    """Send spans and logs to logfire.

    Without a logfire token spans are still created but never leave the
    process, so calling this is optional.
    """
    logfire.configure(
        service_name=config.name + ('-dev' if config.dev else ''),
        service_version=config.version,
        token=config.logfire_token,
        environment='development' if config.dev else 'production',
        scrubbing=False if config.dev else None,
        send_to_logfire='if-token-present',
        console=False
    )

    if instrument:
        logfire.instrument_aiohttp_client()
