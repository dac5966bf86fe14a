from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FlexibleTimeWindowMode(Enum):
    OFF = "OFF"
    FLEXIBLE = "FLEXIBLE"


class FlexibleTimeWindow(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
    )

    mode: FlexibleTimeWindowMode = Field(
        description="Whether the schedule may be invoked within a window around its time.",
        alias="Mode",
    )
    maximum_window_in_minutes: Optional[int] = Field(
        default=None,
        description="The maximum window in minutes, only meaningful when mode is FLEXIBLE.",
        alias="MaximumWindowInMinutes",
    )


class ScheduleTarget(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    arn: str = Field(
        description="The ARN of the target invoked by the schedule.",
        alias="Arn",
    )
    role_arn: str = Field(
        description="The ARN of the role the scheduler assumes to invoke the target.",
        alias="RoleArn",
    )
    input: Optional[str] = Field(
        default=None,
        description="The text passed to the target, e.g. a JSON document.",
        alias="Input",
    )
