from typing import Any, Optional

from .._config import Config
from .._utils import Options, RequestSpec, build_spec
from ._base_service import BaseService


class SchedulerService(BaseService):
    """Builds requests for the schedule API.

    Schedules live under `/schedules/{Name}` on the scheduler service. The
    path is taken from the finished body, so a `name` option overrides both
    the body field and the path.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_schedule(
        self, name: str, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """Create a schedule.

        The service requires `flexible_time_window`, `schedule_expression` and
        `target`; they are passed through as given.

        Args:
            name (str): The name of the schedule. Embedded in the path as is.
            options (Optional[Options]): The schedule fields.

        Returns:
            RequestSpec: A POST to `/schedules/{name}`.

        Examples:
            ```python
            from eventbridge import EventBridge
            from eventbridge.models import FlexibleTimeWindow, ScheduleTarget

            client = EventBridge(region="us-west-2")

            client.scheduler.create_schedule(
                "publish-post",
                flexible_time_window=FlexibleTimeWindow(mode="OFF"),
                schedule_expression="at(2024-10-30T10:10:10)",
                client_token="1",
                target=ScheduleTarget(
                    arn="arn:aws:events:us-west-2:123456789012:event-bus/posts",
                    role_arn="arn:aws:iam::123456789012:role/scheduler",
                ),
            )
            ```
        """
        body = {"Name": name, **self._options_body(options, kwargs)}

        return build_spec("create_schedule", body)

    def delete_schedule(
        self, name: str, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """Delete a schedule.

        Args:
            name (str): The name of the schedule.
            options (Optional[Options]): Extra fields, e.g. `group_name`.

        Returns:
            RequestSpec: A DELETE to `/schedules/{name}`.
        """
        body = {"Name": name, **self._options_body(options, kwargs)}

        return build_spec("delete_schedule", body)
