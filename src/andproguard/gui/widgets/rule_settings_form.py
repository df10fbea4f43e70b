"""
Rule settings form for the AndProguard settings page.

Binds a checkbox and six text fields to getter/setter pairs for the
skip-data flag, the five naming rules and the exclude path. The form owns
its panel; hosts embed the widget returned by get_panel().
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QFrame,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from andproguard.core.config import RULE_FIELDS, RuleSettings
from andproguard.gui.styles.stylesheet import get_widget_style
from andproguard.utils.logger import get_logger

logger = get_logger("andproguard.gui.widgets.rule_settings_form")

# Row labels, in display order
FIELD_LABELS = {
    "class_rule": "Class",
    "method_rule": "Method",
    "field_rule": "Field",
    "id_res_rule": "Resource id",
    "layout_res_rule": "Layout resource",
    "exclude_path": "Exclude path",
}

FIELD_TOOLTIPS = {
    "class_rule": "Rule for new class names, e.g. {[1000](1)[0100](6,12)}(2,3)",
    "method_rule": "Rule for new method names",
    "field_rule": "Rule for new field names",
    "id_res_rule": "Rule for new resource id names",
    "layout_res_rule": "Rule for new layout and other resource file names",
    "exclude_path": "Package names or paths skipped when processing a directory, separated by ;",
}

MAX_TEXT_LENGTH = 2**31 - 1

SKIP_DATA_LABEL = "Skip data classes"
SKIP_DATA_TOOLTIP = (
    "Keep bean getters/setters with their fields and data class "
    "constructor parameters unchanged"
)

RULE_HINT = (
    "[UlDu](n,m): upper, lower, digit, underscore flags  "
    "{...}(n,m): repeated group  <text>: literal"
)


class RuleSettingsForm(QObject):
    """Form editing the seven rule settings values.

    Values passed to the constructor are shown as is; nothing is validated
    here. Every setter updates the matching widget, so the change is visible
    both to the getter and on screen.

    Signals:
        settings_changed(dict): Emitted with RuleSettings.to_dict() whenever
            a value changes, from user input or from a setter.
    """

    settings_changed = pyqtSignal(dict)

    def __init__(
        self,
        skip_data: bool = False,
        class_rule: str = "",
        method_rule: str = "",
        field_rule: str = "",
        id_res_rule: str = "",
        layout_res_rule: str = "",
        exclude_path: str = "",
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._text_fields: dict[str, QLineEdit] = {}
        self._setup_ui()

        self._skip_data.setChecked(skip_data)
        self._class_rule.setText(class_rule)
        self._method_rule.setText(method_rule)
        self._field_rule.setText(field_rule)
        self._id_res_rule.setText(id_res_rule)
        self._layout_res_rule.setText(layout_res_rule)
        self._exclude_path.setText(exclude_path)

        self._connect_signals()
        logger.debug("RuleSettingsForm initialized")

    @classmethod
    def from_settings(cls, settings: RuleSettings, parent: Optional[QObject] = None) -> "RuleSettingsForm":
        """Create a form showing the given settings."""
        return cls(
            settings.skip_data,
            settings.class_rule,
            settings.method_rule,
            settings.field_rule,
            settings.id_res_rule,
            settings.layout_res_rule,
            settings.exclude_path,
            parent=parent,
        )

    def _setup_ui(self) -> None:
        """Build the panel with the checkbox and text fields."""
        self._root_panel = QWidget()
        self._root_panel.setProperty("data-element-id", "rule-settings-panel")

        layout = QVBoxLayout(self._root_panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        frame = QFrame()
        frame.setStyleSheet(get_widget_style("form_frame"))
        form_layout = QFormLayout(frame)
        form_layout.setContentsMargins(12, 12, 12, 12)
        form_layout.setSpacing(8)

        self._skip_data = QCheckBox(SKIP_DATA_LABEL)
        self._skip_data.setProperty("data-element-id", "skip-data-checkbox")
        self._skip_data.setToolTip(SKIP_DATA_TOOLTIP)
        self._skip_data.setStyleSheet(get_widget_style("checkbox"))
        form_layout.addRow(self._skip_data)

        for name, label_text in FIELD_LABELS.items():
            label = QLabel(label_text)
            label.setStyleSheet(get_widget_style("field_label"))

            line_edit = QLineEdit()
            line_edit.setProperty("data-element-id", f"{name.replace('_', '-')}-field")
            line_edit.setToolTip(FIELD_TOOLTIPS[name])
            line_edit.setStyleSheet(get_widget_style("rule_field"))
            # QLineEdit truncates at 32767 characters by default
            line_edit.setMaxLength(MAX_TEXT_LENGTH)
            self._text_fields[name] = line_edit
            form_layout.addRow(label, line_edit)

        hint = QLabel(RULE_HINT)
        hint.setWordWrap(True)
        hint.setStyleSheet(get_widget_style("hint_label"))
        form_layout.addRow(hint)

        layout.addWidget(frame)
        layout.addStretch()

        self._class_rule = self._text_fields["class_rule"]
        self._method_rule = self._text_fields["method_rule"]
        self._field_rule = self._text_fields["field_rule"]
        self._id_res_rule = self._text_fields["id_res_rule"]
        self._layout_res_rule = self._text_fields["layout_res_rule"]
        self._exclude_path = self._text_fields["exclude_path"]

    def _connect_signals(self) -> None:
        self._skip_data.toggled.connect(self._emit_settings_changed)
        for line_edit in self._text_fields.values():
            line_edit.textChanged.connect(self._emit_settings_changed)

    def _emit_settings_changed(self, *args) -> None:
        self.settings_changed.emit(self.get_settings().to_dict())

    def get_panel(self) -> QWidget:
        """Return the panel holding the form widgets, for embedding in a host."""
        return self._root_panel

    def get_skip_data(self) -> bool:
        return self._skip_data.isChecked()

    def set_skip_data(self, skip_data: bool) -> None:
        self._skip_data.setChecked(skip_data)

    def get_class_rule(self) -> str:
        return self._class_rule.text()

    def set_class_rule(self, class_rule: str) -> None:
        self._class_rule.setText(class_rule)

    def get_method_rule(self) -> str:
        return self._method_rule.text()

    def set_method_rule(self, method_rule: str) -> None:
        self._method_rule.setText(method_rule)

    def get_field_rule(self) -> str:
        return self._field_rule.text()

    def set_field_rule(self, field_rule: str) -> None:
        self._field_rule.setText(field_rule)

    def get_id_res_rule(self) -> str:
        return self._id_res_rule.text()

    def set_id_res_rule(self, id_res_rule: str) -> None:
        self._id_res_rule.setText(id_res_rule)

    def get_layout_res_rule(self) -> str:
        return self._layout_res_rule.text()

    def set_layout_res_rule(self, layout_res_rule: str) -> None:
        self._layout_res_rule.setText(layout_res_rule)

    def get_exclude_path(self) -> str:
        return self._exclude_path.text()

    def set_exclude_path(self, exclude_path: str) -> None:
        self._exclude_path.setText(exclude_path)

    def get_settings(self) -> RuleSettings:
        """Return all seven values as a RuleSettings record."""
        return RuleSettings(
            skip_data=self.get_skip_data(),
            class_rule=self.get_class_rule(),
            method_rule=self.get_method_rule(),
            field_rule=self.get_field_rule(),
            id_res_rule=self.get_id_res_rule(),
            layout_res_rule=self.get_layout_res_rule(),
            exclude_path=self.get_exclude_path(),
        )

    def set_settings(self, settings: RuleSettings) -> None:
        """Show all values of a RuleSettings record, emitting one change signal."""
        widgets = [self._skip_data, *self._text_fields.values()]
        for widget in widgets:
            widget.blockSignals(True)
        try:
            self._skip_data.setChecked(settings.skip_data)
            for name in RULE_FIELDS + ("exclude_path",):
                self._text_fields[name].setText(getattr(settings, name))
        finally:
            for widget in widgets:
                widget.blockSignals(False)

        self._emit_settings_changed()
        logger.debug("Rule settings form updated from settings")
