from typing import Any, Iterable, Optional

from .._config import Config
from .._utils import Options, RequestSpec, build_spec, normalize_options
from ._base_service import BaseService


class EventsService(BaseService):
    """Builds requests for the event bus API.

    Every method only assembles a `RequestSpec`; nothing is sent. Options may
    be passed as a mapping or list of pairs in `options`, as keyword
    arguments, or both. Keys are underscored (`name_prefix`) and are sent in
    the service's casing (`NamePrefix`). Keyword arguments win over `options`,
    and both win over the positional fields on a name clash.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def list_event_buses(
        self, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """List event buses.

        Examples:
            ```python
            from eventbridge import EventBridge

            client = EventBridge(region="us-east-1")

            client.events.list_event_buses()
            client.events.list_event_buses(name_prefix="orders-")
            ```
        """
        return build_spec("list_event_buses", self._options_body(options, kwargs))

    def create_event_bus(
        self, name: str, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """Create an event bus.

        Args:
            name (str): The name of the new event bus.
            options (Optional[Options]): Extra request fields, e.g. `event_source_name`.

        Returns:
            RequestSpec: The `AWSEvents.CreateEventBus` request.
        """
        body = {"Name": name, **self._options_body(options, kwargs)}

        return build_spec("create_event_bus", body)

    def delete_event_bus(
        self, name: str, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """Delete an event bus."""
        body = {"Name": name, **self._options_body(options, kwargs)}

        return build_spec("delete_event_bus", body)

    def describe_event_bus(
        self, name: str, options: Optional[Options] = None, /, **kwargs: Any
    ) -> RequestSpec:
        """Describe an event bus."""
        body = {"Name": name, **self._options_body(options, kwargs)}

        return build_spec("describe_event_bus", body)

    def put_events(
        self,
        entries: Iterable[Options],
        options: Optional[Options] = None,
        /,
        **kwargs: Any,
    ) -> RequestSpec:
        """Send custom events to an event bus.

        Each entry is normalized on its own, so entries use the same
        underscored keys as options do.

        Args:
            entries (Iterable[Options]): The events, as mappings, lists of pairs
                or `PutEventsEntry` models.
            options (Optional[Options]): Extra top-level fields, e.g. `endpoint_id`.

        Returns:
            RequestSpec: The `AWSEvents.PutEvents` request.

        Examples:
            ```python
            client.events.put_events(
                [
                    {"source": "shop", "detail_type": "order", "detail": "{}"},
                    PutEventsEntry(source="shop", detail_type="refund", detail="{}"),
                ]
            )
            ```
        """
        body = {
            "Entries": [normalize_options(entry) for entry in entries],
            **self._options_body(options, kwargs),
        }

        return build_spec("put_events", body)
