"""Pydantic models for roster, class and schedule data.

Remote records keep the API's camelCase keys as aliases so payloads validate
directly; unknown keys are ignored unless noted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RosterEntry(BaseModel):
    """One rider registered for the show, from GetRiderData."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    riderID: int
    riderName: str  # may be wrapped as ">NAME<"


class MatchedRider(BaseModel):
    """A roster entry selected for one configured target name."""

    model_config = ConfigDict(frozen=True)

    riderID: int
    riderName: str  # cleaned roster name
    originalName: str  # the configured target name that matched


class ClassRecord(BaseModel):
    """Class metadata from GetClassData. Other API fields are kept as extras."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    classID: str
    className: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ClassRecord":
        # classID arrives as an int on some shows; lookups are keyed by the
        # digits extracted from classText, which are strings
        data = dict(payload)
        if data.get("classID") is not None:
            data["classID"] = str(data["classID"])
        if data.get("className") is None:
            data["className"] = ""
        return cls.model_validate(data)


class RawScheduleEntry(BaseModel):
    """One line of a rider's schedule from GetAllRiderData."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    class_text: str = Field(default="", alias="classText")  # e.g. '<a ...>412</a>'
    test: str | None = None
    ring: str = ""
    day: str = ""
    ride_time: str = Field(default="", alias="rideTime")

    @field_validator("class_text", "test", "ring", "day", "ride_time", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any, info) -> Any:
        if value is None:
            return None if info.field_name == "test" else ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ScheduleRow(BaseModel):
    """A single consolidated schedule line written to schedule.json."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    rider_name: str
    rider_id: int
    class_: str = Field(alias="class")
    ring: str
    day: str  # localized weekday name
    time: str  # "HH:MM"

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
