from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ._endpoint import Endpoint
from ._options import camelize
from ._request_spec import RequestSpec, Service
from .constants import (
    CONTENT_TYPE_JSON_1_1,
    HEADER_CONTENT_TYPE,
    HEADER_TARGET,
    TARGET_PREFIX,
)


@dataclass(frozen=True)
class Operation:
    """Request shaping rules for one API action.

    `target` pins the operation name sent in the target header; when it is
    unset the name is derived from the operation id.
    """

    service: Service
    method: str = "POST"
    path: Endpoint = Endpoint("/")
    target: Optional[str] = None


_SCHEDULE_PATH = Endpoint("/schedules/{name}")

OPERATIONS: Mapping[str, Operation] = MappingProxyType(
    {
        "list_event_buses": Operation(Service.EVENTS),
        "create_event_bus": Operation(Service.EVENTS),
        "delete_event_bus": Operation(Service.EVENTS),
        "describe_event_bus": Operation(Service.EVENTS),
        "put_events": Operation(Service.EVENTS),
        "create_schedule": Operation(
            Service.SCHEDULER,
            method="POST",
            path=_SCHEDULE_PATH,
            target="CreateSchedule",
        ),
        "delete_schedule": Operation(
            Service.SCHEDULER,
            method="DELETE",
            path=_SCHEDULE_PATH,
        ),
    }
)


def operation_name(operation_id: str) -> str:
    operation = OPERATIONS[operation_id]
    return operation.target or camelize(operation_id)


def target_header(operation_id: str) -> str:
    return f"{TARGET_PREFIX}.{operation_name(operation_id)}"


def build_spec(operation_id: str, body: dict[str, Any]) -> RequestSpec:
    """Assembles the request for `operation_id` around an already built body.

    Schedule paths embed the body's final `Name`, so the body has to be
    complete before this is called.

    Raises:
        KeyError: If the operation id is unknown.
        ValueError: If a templated path is filled with a missing or empty name.
    """
    operation = OPERATIONS[operation_id]

    endpoint = str(operation.path)
    if operation.path.is_templated:
        endpoint = operation.path.format(name=body.get("Name"))

    return RequestSpec(
        operation=operation_name(operation_id),
        service=operation.service,
        method=operation.method,
        endpoint=endpoint,
        headers=(
            (HEADER_TARGET, target_header(operation_id)),
            (HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON_1_1),
        ),
        json=MappingProxyType(dict(body)),
    )
