"""Capability probes — is a client navigation framework present?

The renderer asks a probe, on every render, whether the host process
carries the framework whose soft navigations should re-fire page views.
Probes are injected, so tests (and hosts that already know the answer)
can substitute :class:`StaticProbe`.
"""

import importlib
import importlib.util
import logging
import sys
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger("ga4.probe")

# "module:attribute" of the navigation framework's integration point
NAVIGATION_FRAMEWORK = "livewire:Livewire"


class CapabilityProbe(Protocol):
    """Protocol for capability probes.

    Any object with an ``is_framework_present()`` method will do::

        class AlwaysOn:
            def is_framework_present(self) -> bool:
                return True
    """

    def is_framework_present(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class StaticProbe:
    """Probe with a fixed answer."""

    present: bool

    def is_framework_present(self) -> bool:
        return self.present


PRESENT = StaticProbe(present=True)
ABSENT = StaticProbe(present=False)


@dataclass(frozen=True, slots=True)
class SymbolProbe:
    """Probe that checks whether a ``"module:attribute"`` symbol exists.

    Evaluated at call time with no caching, so a framework that gets
    imported after startup is picked up by the next render. Absence is a
    normal answer: a missing module, a missing attribute, a malformed
    target, or a module that fails to import all yield ``False``.
    """

    target: str = NAVIGATION_FRAMEWORK

    def is_framework_present(self) -> bool:
        module_path, _, attr_name = self.target.partition(":")
        if not module_path:
            return False

        module = sys.modules.get(module_path)
        if module is None:
            try:
                if importlib.util.find_spec(module_path) is None:
                    return False
                module = importlib.import_module(module_path)
            except (ImportError, ValueError):
                return False
            except Exception:
                logger.warning("Importing %r raised; treating as absent", module_path, exc_info=True)
                return False

        if not attr_name:
            return True
        # Lazy modules (PEP 562 __getattr__) may raise more than AttributeError
        try:
            getattr(module, attr_name)
        except AttributeError:
            return False
        except Exception:
            logger.warning("Looking up %r raised; treating as absent", self.target, exc_info=True)
            return False
        return True
