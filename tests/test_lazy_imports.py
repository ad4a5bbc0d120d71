"""Tests for ga4.__init__ — lazy import registry covers all public names."""

import subprocess
import sys

import pytest

import ga4


@pytest.mark.parametrize("name", ga4.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(ga4, name)
    assert obj is not None, f"ga4.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    missing = set(ga4.__all__) - set(ga4._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    extras = set(ga4._LAZY_IMPORTS) - set(ga4.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        ga4.__getattr__("ThisDoesNotExist")


def test_helper_is_callable() -> None:
    assert ga4.ga4() == ""


def test_bare_import_does_not_load_kida() -> None:
    """Only the template integration needs kida; the core stays import-light."""
    code = "import sys, ga4; ga4.SnippetRenderer; ga4.GA4Config; print('kida' in sys.modules)"
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
    assert result.stdout.strip() == "False"


def test_template_integration_loads_kida() -> None:
    code = "import sys, ga4; ga4.register_ga4; print('kida' in sys.modules)"
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
    assert result.stdout.strip() == "True"
