"""Widgets module for the lcrview TUI.

- CustomStatic: text line with change detection
- CustomDataTable: display-only table whose cursor the screen drives
- WizardPanel: overlay for the deploy wizard
"""

from lcrview.widgets.custom_data_table import CustomDataTable
from lcrview.widgets.custom_static import CustomStatic
from lcrview.widgets.wizard_panel import WizardPanel

__all__ = [
    "CustomDataTable",
    "CustomStatic",
    "WizardPanel",
]
