"""
Decoding of the raw train data payload into `TrainRecord` values.

The payload is a JSON array of train objects. Time-of-day fields are parsed by
the model's own validation hook, so a malformed time fails the whole decode.
"""

from __future__ import annotations

from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from trainsearch.domain.errors import DecodeError
from trainsearch.domain.models import TrainRecord
from trainsearch.utils.logging import get_logger

log = get_logger(__name__)

_TRAINS_ADAPTER = TypeAdapter(List[TrainRecord])


def _describe(error: ValidationError) -> str:
    """Render the first validation failure as `[index].Field: message`."""
    first = error.errors(include_url=False)[0]
    location = "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


def decode_trains(payload: Union[bytes, str]) -> List[TrainRecord]:
    """
    Decode a JSON array of trains, preserving source order.

    Parameters
    ----------
    payload : bytes | str
        Raw contents of the data source.

    Returns
    -------
    List[TrainRecord]
        One record per array element.

    Raises
    ------
    DecodeError
        If the payload is not a JSON array of well-formed train objects.
    """
    try:
        trains = _TRAINS_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(_describe(exc)) from exc
    log.debug("Decoded trains", extra={"trains": len(trains)})
    return trains


__all__ = ["decode_trains"]
