"""Default renderer and the ``ga4()`` helper.

The default renderer is built once per process from the environment and
reused. Tests, or hosts that change configuration at runtime, call
:func:`reset_default_renderer` to rebuild it on next use.
"""

import functools

from ga4.config import GA4Config
from ga4.probe import CapabilityProbe
from ga4.snippet import SnippetRenderer


def create_renderer(
    config: GA4Config | None = None,
    probe: CapabilityProbe | None = None,
) -> SnippetRenderer:
    """Build a renderer, reading ``GA4_MEASUREMENT_ID`` when no config is given."""
    if config is None:
        config = GA4Config.from_env()
    return SnippetRenderer.from_config(config, probe=probe)


@functools.cache
def default_renderer() -> SnippetRenderer:
    return create_renderer()


def reset_default_renderer() -> None:
    default_renderer.cache_clear()


def ga4() -> str:
    """Render the GA4 snippet from the default renderer.

    Returns ``""`` when ``GA4_MEASUREMENT_ID`` is unset or blank.
    """
    return default_renderer().render()
