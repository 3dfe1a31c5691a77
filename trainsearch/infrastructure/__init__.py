"""
Infrastructure package for train search.

Centralizes I/O concerns (reading the train data payload). Keep this layer
focused on I/O, decoupled from the query pipeline logic.
"""

from trainsearch.infrastructure.data_source import (
    BytesDataSource,
    DataSource,
    FileDataSource,
    get_data_source,
)

__all__ = [
    "BytesDataSource",
    "DataSource",
    "FileDataSource",
    "get_data_source",
]
