# The MIT License (MIT)

# Copyright (c) 2015-2021 Rapptz
# Copyright (c) 2021-present Pycord Development

# Permission is hereby granted, free of charge, to any person obtaining a
# copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
# DEALINGS IN THE SOFTWARE.
# ? route and image payload helpers are adapted from py-cord
from __future__ import annotations
from .errors import HTTPException, Forbidden, NotFound, ServerError, Unauthorized
from aiohttp import __version__ as aiohttp_version, ClientResponse
from base64 import b64encode
from urllib.parse import quote
from sys import version_info
from typing import Any
from orjson import loads


__all__ = (
    'Route',
    'exception_for',
    'json_or_text',
    'user_agent',
)


def user_agent(name: str, url: str, version: str) -> str:
    return ' '.join([
        f'{name} ({url}, {version})',
        f'Python/{".".join([str(i) for i in version_info[:3]])}',
        f'aiohttp/{aiohttp_version}'
    ])


class Route:
    def __init__(
        self,
        method: str,
        path: str,
        **params  # noqa: ANN003
    ) -> None:
        self.method = method
        self.path = path

        self.url = path.format(**{
            k: quote(v, safe='') if isinstance(v, str) else v
            for k, v in params.items()
        }) if params else path

    def __repr__(self) -> str:
        return f'<Route {self.method} {self.url}>'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented

        return self.method == other.method and self.url == other.url

    def __hash__(self) -> int:
        return hash((self.method, self.url))


async def json_or_text(response: ClientResponse) -> dict[str, Any] | list[Any] | str | None:
    text = await response.text(encoding='utf-8')

    if not text:
        return None

    # ? content-type may carry a charset
    if response.headers.get('content-type', '').startswith('application/json'):
        return loads(text)

    return text


def exception_for(
    status: int,
    data: dict[str, Any] | list[Any] | str | None
) -> HTTPException:
    message, code = (
        (data.get('message'), data.get('code'))
        if isinstance(data, dict) else
        (data or None, None)
    )

    match status:
        case 401:
            return Unauthorized(message, code)
        case 403:
            return Forbidden(message, code)
        case 404:
            return NotFound(message, code)
        case _ if status >= 500:
            return ServerError(message, code, status)
        case _:
            return HTTPException(message, code, status)


def _get_mime_type_for_image(data: bytes) -> str:
    if data.startswith(b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'):
        return 'image/png'
    if data[0:3] == b'\xff\xd8\xff' or data[6:10] in (b'JFIF', b'Exif'):
        return 'image/jpeg'
    if data.startswith((b'\x47\x49\x46\x38\x37\x61', b'\x47\x49\x46\x38\x39\x61')):
        return 'image/gif'
    if data.startswith(b'RIFF') and data[8:12] == b'WEBP':
        return 'image/webp'
    raise ValueError('unsupported image type given')


def _bytes_to_base64_data(data: bytes) -> str:
    return ''.join([
        'data:', _get_mime_type_for_image(data),
        ';base64,', b64encode(data).decode('ascii')
    ])
