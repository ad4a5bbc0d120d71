"""GA4 configuration.

GA4Config is a frozen dataclass. Loose configuration values (whatever an
env var, settings dict or user code hands us) are coerced here, at the
boundary, so the renderer only ever sees ``str | None``.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger("ga4")

ENV_VAR = "GA4_MEASUREMENT_ID"
CONFIG_KEY = "measurement_id"


def coerce_measurement_id(value: object) -> str | None:
    """Normalize any configured value into a measurement ID or ``None``.

    Non-strings (``None``, booleans, numbers, lists, dicts, objects) are
    treated as absent. Strings are stripped of surrounding whitespace;
    an empty result is also absent.
    """
    if not isinstance(value, str):
        if value is not None:
            logger.debug("Ignoring non-string measurement ID of type %s", type(value).__name__)
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True, slots=True)
class GA4Config:
    """GA4 configuration. Immutable after creation.

    Build it from whatever source you have::

        config = GA4Config.from_env()
        config = GA4Config.from_mapping(settings.GA4)
        config = GA4Config(measurement_id="G-XXXXXXXXXX")
    """

    measurement_id: str | None = None

    def __post_init__(self) -> None:
        # Direct construction is normalized the same way as the loaders
        object.__setattr__(self, "measurement_id", coerce_measurement_id(self.measurement_id))

    @property
    def enabled(self) -> bool:
        """True when a measurement ID is configured."""
        return self.measurement_id is not None

    @classmethod
    def from_value(cls, value: object) -> "GA4Config":
        return cls(measurement_id=coerce_measurement_id(value))

    @classmethod
    def from_mapping(cls, mapping: object) -> "GA4Config":
        """Build from a settings mapping with a ``measurement_id`` key.

        A non-mapping or a mapping without the key yields an unconfigured
        config rather than an error.
        """
        if not isinstance(mapping, Mapping):
            return cls()
        return cls.from_value(mapping.get(CONFIG_KEY))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GA4Config":
        """Read ``GA4_MEASUREMENT_ID`` (default empty) from the environment."""
        if environ is None:
            environ = os.environ
        return cls.from_value(environ.get(ENV_VAR, ""))
