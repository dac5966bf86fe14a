from typing import Any


class Endpoint(str):
    """A request path, possibly with `{placeholders}` for resource names.

    Placeholders are filled literally, without escaping. Missing or empty
    values are refused so a resource path never collapses into its
    collection path.

    Examples:
        >>> Endpoint("/schedules/{name}").format(name="nightly")
        '/schedules/nightly'

    Raises:
        ValueError: If format() is called with None or an empty string.
    """

    def format(self, **kwargs: Any) -> str:
        for key, value in kwargs.items():
            if value is None or value == "":
                raise ValueError(f"Keyword argument `{key}` is `{value}`.")

        return super().format(**kwargs)

    @property
    def is_templated(self) -> bool:
        return "{" in self
