"""
Byte sources for the train data payload.

The query pipeline only needs "something that returns the raw payload or fails
with an I/O error". `FileDataSource` reads the configured file; `BytesDataSource`
serves an in-memory payload.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

from trainsearch.config import Settings, get_settings
from trainsearch.domain.errors import DataSourceError
from trainsearch.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class DataSource(Protocol):
    """
    Anything that can produce the raw train payload.
    """

    def read(self) -> bytes:
        """
        Return the full payload.

        Raises
        ------
        DataSourceError
            If the payload cannot be read.
        """
        ...


class FileDataSource:
    """Read the payload from a file on the local filesystem."""

    def __init__(self, path: Union[Path, str]) -> None:
        self.path = Path(path)

    def read(self) -> bytes:
        log.debug("Reading train data", extra={"path": str(self.path)})
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise DataSourceError(f"{self.path}: {exc.strerror or exc}") from exc

    def __repr__(self) -> str:
        return f"FileDataSource({str(self.path)!r})"


class BytesDataSource:
    """Serve a payload held in memory."""

    def __init__(self, payload: Union[bytes, str]) -> None:
        self._payload = payload.encode("utf-8") if isinstance(payload, str) else payload

    def read(self) -> bytes:
        return self._payload


def get_data_source(settings: Optional[Settings] = None) -> FileDataSource:
    """
    Build the default data source for the configured data file.
    """
    settings = settings or get_settings()
    return FileDataSource(settings.data_file)


__all__ = ["DataSource", "FileDataSource", "BytesDataSource", "get_data_source"]
