"""Screens for the lcrview TUI."""

from lcrview.screens.dashboard_screen import DashboardScreen

__all__ = ["DashboardScreen"]
