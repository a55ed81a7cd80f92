"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from routecanal.errors import ConfigurationError

ORDERINGS: frozenset[str] = frozenset({"descending", "insertion"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(anchored=True, expose_errors=False)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 9876
    debug: bool = False

    # Matching
    anchored: bool = False  # fullmatch the whole path instead of searching it
    ordering: str = "descending"  # "descending" (pattern source, z→a) or "insertion"

    # Errors
    expose_errors: bool = True  # 500 body carries the handler's exception message

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        if self.ordering not in ORDERINGS:
            allowed = ", ".join(sorted(ORDERINGS))
            msg = f"Unknown route ordering {self.ordering!r}. Expected one of: {allowed}."
            raise ConfigurationError(msg)
