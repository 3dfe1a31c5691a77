"""
Domain models for train search.

`TrainRecord` mirrors one object of the train data file. Field aliases match
the keys used in the data file; the Python names are accepted too so records
can be built directly in code. `Query` is a validated user request.
"""
from __future__ import annotations

from datetime import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from trainsearch.domain.timeparse import format_time_of_day, parse_time_of_day


class Criteria(str, Enum):
    """Supported sort keys."""

    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"


class TrainRecord(BaseModel):
    """
    One scheduled train segment.
    """

    id: int = Field(..., alias="TrainID", description="Train identifier.")
    departure_station_id: int = Field(..., alias="DepartureStationID")
    arrival_station_id: int = Field(..., alias="ArrivalStationID")
    price: float = Field(
        ..., alias="Price", allow_inf_nan=False, description="Fare; finite, not range-checked."
    )
    arrival_time: time = Field(..., alias="ArrivalTime")
    departure_time: time = Field(..., alias="DepartureTime")

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
    )

    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def _parse_time(cls, value: Any) -> time:
        if isinstance(value, time):
            return value
        return parse_time_of_day(value)

    @field_serializer("arrival_time", "departure_time")
    def _format_time(self, value: time) -> str:
        return format_time_of_day(value)


class Query(BaseModel):
    """
    A validated search request.
    """

    departure_station: int = Field(..., ge=1)
    arrival_station: int = Field(..., ge=1)
    criteria: Criteria

    model_config = ConfigDict(frozen=True)


__all__ = ["Criteria", "TrainRecord", "Query"]
