"""GA4 snippet rendering.

Builds the ``gtag.js`` markup for a measurement ID:

**Loader**: ``<script async src=".../gtag/js?id=ID"></script>``.

**Bootstrap**: initializes ``window.dataLayer``, defines ``gtag()``, sets
the start time and configures the ID with ``send_page_view: false`` so
the first page view is fired under the host's control.

**Navigation** (only when the probe finds the navigation framework):
re-runs ``gtag('config', ...)`` on every ``livewire:navigated`` event,
which fires a page view for each client-side route change.

An unset or blank ID renders as the empty string, so unconfigured
environments (development, tests) get no tracking and no broken markup.
"""

import html

from ga4.config import GA4Config
from ga4.probe import CapabilityProbe, SymbolProbe

GTAG_URL = "https://www.googletagmanager.com/gtag/js"
NAVIGATED_EVENT = "livewire:navigated"

LOADER_TEMPLATE = '<script async src="{url}?id={id}"></script>'

BOOTSTRAP_TEMPLATE = """\
<script>
  window.dataLayer = window.dataLayer || [];
  function gtag(){{dataLayer.push(arguments);}}
  gtag('js', new Date());
  gtag('config', "{id}", {{ send_page_view: false }});
</script>"""

NAVIGATION_TEMPLATE = """\
<script data-ga4="navigation">
  document.addEventListener('{event}', () => {{
    gtag('config', "{id}", {{ page_location: window.location.href, page_title: document.title }});
  }});
</script>"""


class SnippetRenderer:
    """Renders the GA4 tracking snippet for one measurement ID.

    Holds no mutable state after construction, so a single instance can
    serve every request of a process.

    Usage::

        renderer = SnippetRenderer("G-XXXXXXXXXX")
        html = renderer.render()
    """

    __slots__ = ("_measurement_id", "_probe")

    def __init__(
        self,
        measurement_id: str | None = None,
        *,
        probe: CapabilityProbe | None = None,
    ) -> None:
        self._measurement_id = measurement_id
        self._probe: CapabilityProbe = probe if probe is not None else SymbolProbe()

    @classmethod
    def from_config(
        cls,
        config: GA4Config,
        probe: CapabilityProbe | None = None,
    ) -> "SnippetRenderer":
        return cls(config.measurement_id, probe=probe)

    @property
    def measurement_id(self) -> str | None:
        """The stripped measurement ID, or ``None`` when unset or blank."""
        value = self._measurement_id
        if not isinstance(value, str):
            return None
        return value.strip() or None

    @property
    def enabled(self) -> bool:
        return self.measurement_id is not None

    def render(self) -> str:
        """Return the snippet HTML, or ``""`` when no ID is configured.

        The ID is HTML-escaped at every place it appears. The probe is
        asked afresh on each call.
        """
        measurement_id = self.measurement_id
        if measurement_id is None:
            return ""

        escaped = html.escape(measurement_id, quote=True)
        parts = [
            LOADER_TEMPLATE.format(url=GTAG_URL, id=escaped),
            BOOTSTRAP_TEMPLATE.format(id=escaped),
        ]
        if self._probe.is_framework_present():
            parts.append(NAVIGATION_TEMPLATE.format(event=NAVIGATED_EVENT, id=escaped))
        return "\n".join(parts)

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SnippetRenderer(measurement_id={self.measurement_id!r})"
