"""kida integration — expose the snippet as a template global.

Usage::

    from kida import Environment
    from ga4.templating import register_ga4

    env = Environment(autoescape=True)
    register_ga4(env)

Then in a layout::

    <body>
      ...
      {{ ga4() }}
    </body>
"""

from collections.abc import Callable

from kida import Environment
from kida.template import Markup

from ga4.helpers import default_renderer
from ga4.snippet import SnippetRenderer


def ga4_global(renderer: SnippetRenderer | None = None) -> Callable[[], Markup]:
    """Build the template callable for *renderer* (default: process-wide renderer).

    Returns Markup so autoescape does not escape the script tags.
    """

    def ga4() -> Markup:
        active = renderer if renderer is not None else default_renderer()
        return Markup(active.render())

    return ga4


def register_ga4(
    env: Environment,
    renderer: SnippetRenderer | None = None,
    *,
    name: str = "ga4",
) -> None:
    """Register the snippet global on a kida Environment."""
    env.add_global(name, ga4_global(renderer))
