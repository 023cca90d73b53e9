"""
Roster sources.

A source produces raw sheet text. The remote source fetches a published
CSV over HTTP with httpx; file and in-memory sources exist for offline use
and tests.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

import httpx


logger = logging.getLogger(__name__)


class RosterSourceError(Exception):
    """Base exception for roster source errors."""
    pass


class RosterFetchError(RosterSourceError):
    """Raised when the remote sheet answers with a non-200 status."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RosterSource(Protocol):
    """Anything that can produce roster text."""

    description: str

    async def fetch(self) -> str:
        ...


class SheetSource:
    """
    Published spreadsheet (CSV export URL).

    Usage:
        source = SheetSource("https://docs.google.com/.../pub?output=csv")
        text = await source.fetch()
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @property
    def description(self) -> str:
        return self.url

    async def fetch(self) -> str:
        """
        Download the sheet text.

        Raises:
            RosterFetchError: Non-200 response
            RosterSourceError: Network failure or timeout
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url)
        except httpx.TimeoutException:
            raise RosterSourceError(f"Timed out fetching {self.url}") from None
        except httpx.RequestError as e:
            raise RosterSourceError(f"Request error: {e}") from e

        if response.status_code != 200:
            raise RosterFetchError(
                f"Sheet returned HTTP {response.status_code}",
                response.status_code,
            )
        return response.text


class FileSource:
    """Local CSV file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def description(self) -> str:
        return str(self.path)

    async def fetch(self) -> str:
        try:
            return await asyncio.to_thread(self.path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise RosterSourceError(f"Cannot read {self.path}: {e}") from e


class TextSource:
    """Roster text already in memory."""

    description = "<text>"

    def __init__(self, text: str):
        self.text = text

    async def fetch(self) -> str:
        return self.text


def source_from_string(value: str, timeout: float = 10.0) -> Union[SheetSource, FileSource]:
    """URL -> SheetSource, anything else is treated as a file path."""
    if value.lower().startswith(("http://", "https://")):
        return SheetSource(value, timeout=timeout)
    return FileSource(value)
