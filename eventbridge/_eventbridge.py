from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._services import EventsService, SchedulerService
from ._utils import setup_logging
from ._utils.constants import ENV_DEFAULT_REGION, ENV_ENDPOINT_URL, ENV_REGION
from .models.errors import RegionMissingError

load_dotenv(override=True)


class EventBridge:
    def __init__(
        self,
        *,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        debug: bool = False,
    ) -> None:
        region_value = region or env.get(ENV_REGION) or env.get(ENV_DEFAULT_REGION)
        endpoint_url_value = endpoint_url or env.get(ENV_ENDPOINT_URL)

        try:
            self._config = Config(
                region=region_value,  # type: ignore
                endpoint_url=endpoint_url_value,
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"][0] == "region":
                    raise RegionMissingError() from e
            raise

        setup_logging(debug)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def events(self) -> EventsService:
        return EventsService(self._config)

    @property
    def scheduler(self) -> SchedulerService:
        return SchedulerService(self._config)
