"""Row of buttons, one per built-in preset."""

from PySide6.QtWidgets import QWidget, QGridLayout, QLabel, QPushButton, QVBoxLayout
from PySide6.QtCore import Signal

from ...processing import get_preset_names


class PresetBar(QWidget):
    """Preset selection buttons."""

    # Signal: emitted with the preset name
    preset_selected = Signal(str)

    COLUMNS = 3

    def __init__(self):
        super().__init__()
        self.buttons = {}
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("Presets"))

        # Grid keeps the minimum width small
        grid = QGridLayout()
        for index, name in enumerate(get_preset_names()):
            button = QPushButton(name.title())
            button.setCheckable(True)
            button.clicked.connect(lambda _=False, preset=name: self._on_clicked(preset))
            grid.addWidget(button, index // self.COLUMNS, index % self.COLUMNS)
            self.buttons[name] = button
        layout.addLayout(grid)

    def _on_clicked(self, name: str) -> None:
        self.set_active(name)
        self.preset_selected.emit(name)

    def set_active(self, name) -> None:
        """Highlight the active preset (None clears the highlight)."""
        for preset, button in self.buttons.items():
            button.setChecked(preset == name)
