"""Checks on the adapter packages and their entry points."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in ("src.adapters.interface", "src.adapters.interface.streamlit"):
        assert import_module(name).__all__ == []


def test_entry_points_expose_main() -> None:
    for name in (
        "src.adapters.interface.streamlit.app",
        "src.adapters.period_report_cli",
    ):
        assert callable(import_module(name).main)
