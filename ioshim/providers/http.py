"""Provider reading ``http`` and ``https`` URLs"""

from __future__ import annotations

from http.client import HTTPException
from typing import IO, TYPE_CHECKING, Any
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from ioshim.providers import StreamReader
from ioshim.resources import HttpUrl
from ioshim.streams import StreamOptions

if TYPE_CHECKING:
    # typing.Self requires Python 3.11
    from typing_extensions import Self

    from ioshim.settings import BaseSettings


class HttpUrlReader(StreamReader):
    resource_type = HttpUrl
    native_errors = (OSError, HTTPException)

    def __init__(
        self,
        options: StreamOptions | None = None,
        timeout: float = 180.0,
        user_agent: str = "ioshim",
    ):
        super().__init__(options)
        self.timeout: float = timeout
        self.user_agent: str = user_agent

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> Self:
        return cls(
            StreamOptions.from_settings(settings),
            timeout=settings.getfloat("HTTP_TIMEOUT"),
            user_agent=settings.get("HTTP_USER_AGENT"),
        )

    def open_native(self, resource: HttpUrl, element_type: str) -> IO[Any]:
        request = Request(resource.url, headers={"User-Agent": self.user_agent})
        try:
            return urlopen(request, timeout=self.timeout)  # noqa: S310
        except HTTPError as e:
            # the error carries the open error page
            e.close()
            raise
