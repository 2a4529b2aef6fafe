"""
Slider panel for the filter adjustments.

One tab per adjustment category, one slider per adjustment with a label
showing the formatted value. Sliders are integer-based; adjustments with a
fractional step are scaled accordingly.
"""

from typing import Dict

from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QGridLayout,
    QLabel,
    QSlider,
    QTabWidget,
)
from PySide6.QtCore import Qt, Signal

from ...processing import (
    AdjustmentDefinition,
    FilterParameters,
    get_adjustments_by_category,
    get_all_categories,
)


class AdjustmentPanel(QWidget):
    """Edit the value of every adjustment."""

    # Signal: (adjustment key, new value)
    parameter_changed = Signal(str, float)

    def __init__(self):
        super().__init__()
        self.sliders: Dict[str, QSlider] = {}
        self.value_labels: Dict[str, QLabel] = {}
        self.definitions: Dict[str, AdjustmentDefinition] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the tabbed slider UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.tabs = QTabWidget()
        for category in get_all_categories():
            self.tabs.addTab(self._build_category_page(category), category)
        layout.addWidget(self.tabs)

    def _build_category_page(self, category: str) -> QWidget:
        page = QWidget()
        grid = QGridLayout(page)
        grid.setContentsMargins(8, 8, 8, 8)

        for row, definition in enumerate(get_adjustments_by_category(category)):
            slider = self._create_slider(definition)
            value_label = QLabel(definition.format_value(definition.identity))
            value_label.setMinimumWidth(50)
            value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

            name_label = QLabel(definition.name)
            name_label.setToolTip(definition.description)

            grid.addWidget(name_label, row, 0)
            grid.addWidget(slider, row, 1)
            grid.addWidget(value_label, row, 2)

            self.sliders[definition.key] = slider
            self.value_labels[definition.key] = value_label
            self.definitions[definition.key] = definition

        grid.setColumnStretch(1, 1)
        grid.setRowStretch(grid.rowCount(), 1)
        return page

    def _create_slider(self, definition: AdjustmentDefinition) -> QSlider:
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setMinimum(self._to_slider(definition, definition.min_val))
        slider.setMaximum(self._to_slider(definition, definition.max_val))
        slider.setValue(self._to_slider(definition, definition.identity))
        slider.valueChanged.connect(
            lambda position, key=definition.key: self._on_slider_moved(key, position)
        )
        return slider

    @staticmethod
    def _to_slider(definition: AdjustmentDefinition, value: float) -> int:
        return int(round(value / definition.step))

    @staticmethod
    def _from_slider(definition: AdjustmentDefinition, position: int) -> float:
        return round(position * definition.step, 6)

    def _on_slider_moved(self, key: str, position: int) -> None:
        """Handle slider value change."""
        definition = self.definitions[key]
        value = self._from_slider(definition, position)
        self.value_labels[key].setText(definition.format_value(value))
        self.parameter_changed.emit(key, value)

    def set_values(self, params: FilterParameters) -> None:
        """Move every slider to the given values without emitting changes."""
        for key, value in params.items():
            slider = self.sliders[key]
            definition = self.definitions[key]
            slider.blockSignals(True)
            slider.setValue(self._to_slider(definition, value))
            slider.blockSignals(False)
            self.value_labels[key].setText(definition.format_value(value))
