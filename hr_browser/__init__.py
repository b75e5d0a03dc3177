"""
Top-level package for the HR analytics browser.

This package exposes the core architecture (cross-filter engine, views, UI adapters).
Most code should import from submodules such as:
    hr_browser.core
    hr_browser.views
    hr_browser.ui
"""

__all__: list[str] = []
