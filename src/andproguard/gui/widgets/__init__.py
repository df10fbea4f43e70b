"""
Widgets package for the AndProguard GUI.

Example:
    >>> from andproguard.gui.widgets import RuleSettingsForm
    >>> form = RuleSettingsForm(False, "-keep class **", "-keepclassmembers", "", "", "", "build/")
    >>> form.get_panel().show()
"""

from .rule_settings_form import RuleSettingsForm

__all__ = ["RuleSettingsForm"]
