"""ga4 — Google Analytics 4 snippet for server-rendered HTML.

Renders the ``gtag.js`` loader and configuration call for a measurement
ID, and nothing at all when no ID is configured. When the Livewire-style
navigation framework is present, adds a listener that fires a page view
on each soft navigation.

Basic usage::

    from ga4 import SnippetRenderer

    html = SnippetRenderer("G-XXXXXXXXXX").render()

Configured from ``GA4_MEASUREMENT_ID``::

    from ga4 import ga4

    html = ga4()
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ABSENT",
    "PRESENT",
    "CapabilityProbe",
    "GA4Config",
    "GA4Middleware",
    "SnippetRenderer",
    "StaticProbe",
    "SymbolProbe",
    "create_renderer",
    "default_renderer",
    "ga4",
    "register_ga4",
    "reset_default_renderer",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ABSENT": "ga4.probe",
    "PRESENT": "ga4.probe",
    "CapabilityProbe": "ga4.probe",
    "GA4Config": "ga4.config",
    "GA4Middleware": "ga4.inject",
    "SnippetRenderer": "ga4.snippet",
    "StaticProbe": "ga4.probe",
    "SymbolProbe": "ga4.probe",
    "create_renderer": "ga4.helpers",
    "default_renderer": "ga4.helpers",
    "ga4": "ga4.helpers",
    "register_ga4": "ga4.templating",
    "reset_default_renderer": "ga4.helpers",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ga4`` from pulling in kida until a template
    integration is actually used.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
