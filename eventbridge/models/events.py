from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PutEventsEntry(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    source: Optional[str] = Field(
        default=None,
        description="The source of the event.",
        alias="Source",
    )
    detail_type: Optional[str] = Field(
        default=None,
        description="Free-form string used to decide what fields to expect in the event detail.",
        alias="DetailType",
    )
    detail: Optional[str] = Field(
        default=None,
        description="A valid JSON object, as a string.",
        alias="Detail",
    )
    event_bus_name: Optional[str] = Field(
        default=None,
        description="The name or ARN of the event bus to receive the event. Defaults to the account's default bus.",
        alias="EventBusName",
    )
    resources: Optional[List[str]] = Field(
        default=None,
        description="ARNs of the resources the event primarily concerns.",
        alias="Resources",
    )
    time: Optional[datetime] = Field(
        default=None,
        description="The time stamp of the event. Defaults to the time of the call.",
        alias="Time",
    )
    trace_header: Optional[str] = Field(
        default=None,
        description="An X-Ray trace header associated with the event.",
        alias="TraceHeader",
    )
