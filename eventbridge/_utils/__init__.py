from ._endpoint import Endpoint
from ._logs import setup_logging
from ._operations import OPERATIONS, Operation, build_spec, target_header
from ._options import Options, camelize, normalize_options
from ._request_spec import RequestSpec, Service

__all__ = [
    "Endpoint",
    "setup_logging",
    "OPERATIONS",
    "Operation",
    "build_spec",
    "target_header",
    "Options",
    "camelize",
    "normalize_options",
    "RequestSpec",
    "Service",
]
