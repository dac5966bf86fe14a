"""Request builders for the EventBridge event bus and scheduler APIs.

Each operation returns a `RequestSpec` describing the call: target service,
method, path, headers and body. Nothing is signed or sent; hand the `RequestSpec` (or
the unsent `httpx.Request` from `build_request`) to your own signing client.

Example:
```python
    # Either pass region= or set AWS_REGION (a .env file is honored).
    from eventbridge import EventBridge

    client = EventBridge(region="us-east-1")
    spec = client.events.create_event_bus("orders")
    request = client.events.build_request(spec)
```
"""

from ._eventbridge import EventBridge
from ._utils import RequestSpec, Service, camelize, normalize_options

__all__ = [
    "EventBridge",
    "RequestSpec",
    "Service",
    "camelize",
    "normalize_options",
]
