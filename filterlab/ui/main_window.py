"""
Main application window (Qt 6).

Orchestrates the editor:
- Image view with zoom/pan and a preview/original toggle
- Adjustment sliders and preset buttons
- Open, export, reset, and adjustment file actions plus a log panel
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QFileDialog,
    QMessageBox,
    QSplitter,
)
from PySide6.QtCore import Qt

from ..core import ValidationEngine, ValidationSeverity, has_errors
from ..oiio import OiioAdapter
from ..services import AdjustmentSerializer, EditorState, Settings
from ..services.export_runner import ExportManager
from ..utils.logging import logger
from .imaging import bitmap_to_qimage
from .widgets import AdjustmentPanel, ImageView, PresetBar


ADJUSTMENT_FILE_FILTER = "FilterLab Adjustments (*.json);;All Files (*)"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()
        self.setWindowTitle("FilterLab")
        self.setGeometry(100, 100, 1400, 900)
        self.setAcceptDrops(True)

        # Settings
        self.settings = settings or Settings()

        # State
        self.state = EditorState()
        self.export_manager = ExportManager()

        # Build UI
        self._build_ui()
        self._connect_signals()
        self._update_controls()

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(10, 10, 10, 10)

        main_layout.addLayout(self._create_toolbar())

        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.image_view = ImageView()
        splitter.addWidget(self.image_view)
        splitter.addWidget(self._create_side_panel())
        splitter.setStretchFactor(0, 70)
        splitter.setStretchFactor(1, 30)
        main_layout.addWidget(splitter, 1)

        self.log_text = QTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumHeight(120)
        main_layout.addWidget(self.log_text)

    def _create_toolbar(self) -> QHBoxLayout:
        """Top row of buttons."""
        layout = QHBoxLayout()

        self.btn_open = QPushButton("Open Image")
        layout.addWidget(self.btn_open)

        layout.addSpacing(20)
        self.btn_zoom_out = QPushButton("−")
        self.zoom_label = QLabel("100%")
        self.zoom_label.setMinimumWidth(50)
        self.zoom_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.btn_zoom_in = QPushButton("+")
        layout.addWidget(self.btn_zoom_out)
        layout.addWidget(self.zoom_label)
        layout.addWidget(self.btn_zoom_in)

        self.btn_preview = QPushButton("Preview")
        self.btn_preview.setCheckable(True)
        self.btn_preview.setChecked(True)
        layout.addWidget(self.btn_preview)

        layout.addStretch()

        self.btn_load_adjustments = QPushButton("Load Adjustments")
        self.btn_save_adjustments = QPushButton("Save Adjustments")
        self.btn_reset = QPushButton("Reset")
        self.btn_export = QPushButton("Export")
        layout.addWidget(self.btn_load_adjustments)
        layout.addWidget(self.btn_save_adjustments)
        layout.addWidget(self.btn_reset)
        layout.addWidget(self.btn_export)
        return layout

    def _create_side_panel(self) -> QWidget:
        """Presets above the adjustment sliders."""
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)

        self.preset_bar = PresetBar()
        layout.addWidget(self.preset_bar)

        self.adjustment_panel = AdjustmentPanel()
        layout.addWidget(self.adjustment_panel, 1)
        return panel

    def _connect_signals(self) -> None:
        self.btn_open.clicked.connect(self._on_open_image)
        self.btn_zoom_in.clicked.connect(self.image_view.zoom_in)
        self.btn_zoom_out.clicked.connect(self.image_view.zoom_out)
        self.btn_preview.clicked.connect(self._on_toggle_preview)
        self.btn_reset.clicked.connect(self._on_reset)
        self.btn_export.clicked.connect(self._on_export)
        self.btn_save_adjustments.clicked.connect(self._on_save_adjustments)
        self.btn_load_adjustments.clicked.connect(self._on_load_adjustments)

        self.image_view.zoom_changed.connect(self._on_zoom_changed)
        self.adjustment_panel.parameter_changed.connect(self._on_parameter_changed)
        self.preset_bar.preset_selected.connect(self._on_preset_selected)

        self.export_manager.log.connect(self._append_log)
        self.export_manager.progress.connect(self._on_export_progress)
        self.export_manager.finished.connect(self._on_export_finished)

    # ========== Image Loading ==========

    def _on_open_image(self) -> None:
        """Handle 'Open Image' button."""
        initial_dir = self.settings.get_input_dir() or ""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Image",
            initial_dir,
            OiioAdapter.file_dialog_filter(),
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str) -> None:
        """Decode a file and make it the current original."""
        if not OiioAdapter.is_image_file(file_path):
            self._append_log(f"[WARN] Not an image file: {file_path}")
            return

        try:
            bitmap = OiioAdapter.load_bitmap(file_path)
        except RuntimeError as e:
            self._append_log(f"[ERROR] {e}")
            QMessageBox.critical(self, "Open Error", f"Failed to open image:\n{e}")
            return

        self.state.load_image(bitmap, file_path)
        self.setWindowTitle(f"FilterLab - {Path(self.state.source_path).name}")
        self.settings.set_input_dir(str(Path(file_path).parent))
        self._append_log(f"[OK] Loaded {file_path} ({bitmap.width}x{bitmap.height})")
        self._refresh_preview(reset_view=True)
        self._update_controls()

    def dragEnterEvent(self, event) -> None:
        if self._dropped_image_path(event) is not None:
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event) -> None:
        path = self._dropped_image_path(event)
        if path is not None:
            event.acceptProposedAction()
            self.load_image(path)

    @staticmethod
    def _dropped_image_path(event) -> Optional[str]:
        """First dropped local file, if it looks like an image."""
        mime = event.mimeData()
        if not mime.hasUrls():
            return None
        for url in mime.urls():
            path = url.toLocalFile()
            if path and OiioAdapter.is_image_file(path):
                return path
        return None

    # ========== Adjustments ==========

    def _on_parameter_changed(self, key: str, value: float) -> None:
        self.state.set_parameter(key, value)
        self.preset_bar.set_active(None)
        self._refresh_preview()

    def _on_preset_selected(self, name: str) -> None:
        self.state.apply_preset(name)
        self.adjustment_panel.set_values(self.state.params)
        self._append_log(f"Applied preset '{name}'")
        self._refresh_preview()

    def _on_reset(self) -> None:
        self.state.reset()
        self.adjustment_panel.set_values(self.state.params)
        self.preset_bar.set_active(None)
        self._refresh_preview()

    def _on_save_adjustments(self) -> None:
        """Handle 'Save Adjustments' button."""
        initial_dir = self.settings.get_adjustments_dir() or ""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Adjustments", initial_dir, ADJUSTMENT_FILE_FILTER
        )
        if not file_path:
            return

        try:
            path = Path(file_path)
            AdjustmentSerializer.save_to_file(self.state.params, path, self.state.active_preset)
            self.settings.set_adjustments_dir(str(path.parent))
            self._append_log(f"[OK] Adjustments saved to: {path}")
        except OSError as e:
            self._append_log(f"[ERROR] Failed to save adjustments: {e}")
            QMessageBox.critical(self, "Save Error", f"Failed to save adjustments:\n{e}")

    def _on_load_adjustments(self) -> None:
        """Handle 'Load Adjustments' button."""
        initial_dir = self.settings.get_adjustments_dir() or ""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Load Adjustments", initial_dir, ADJUSTMENT_FILE_FILTER
        )
        if not file_path:
            return

        try:
            path = Path(file_path)
            params, preset = AdjustmentSerializer.load_from_file(path)
        except (OSError, ValueError) as e:
            self._append_log(f"[ERROR] Failed to load adjustments: {e}")
            QMessageBox.critical(self, "Load Error", f"Failed to load adjustments:\n{e}")
            return

        self.state.set_parameters(params, preset)
        self.settings.set_adjustments_dir(str(path.parent))
        self.adjustment_panel.set_values(self.state.params)
        self.preset_bar.set_active(preset)
        self._append_log(f"[OK] Adjustments loaded from: {path}")
        self._refresh_preview()

    # ========== Display ==========

    def _on_toggle_preview(self) -> None:
        preview = self.state.toggle_preview()
        self.btn_preview.setChecked(preview)
        self.btn_preview.setText("Preview" if preview else "Original")
        self._refresh_preview()

    def _on_zoom_changed(self, zoom: float) -> None:
        self.zoom_label.setText(self.image_view.view.zoom_label())

    def _refresh_preview(self, reset_view: bool = False) -> None:
        """Re-render and show the current image."""
        bitmap = self.state.display_bitmap()
        if bitmap is None:
            return
        self.image_view.set_image(bitmap_to_qimage(bitmap), reset_view=reset_view)

    def _update_controls(self) -> None:
        """Enable actions that need a loaded image."""
        has_image = self.state.has_image()
        self.btn_reset.setEnabled(has_image)
        self.btn_export.setEnabled(has_image)

    # ========== Export ==========

    def _on_export(self) -> None:
        """Handle 'Export' button."""
        if self.export_manager.is_running():
            self._append_log("Export already in progress")
            return

        initial_dir = self.settings.get_output_dir() or ""
        initial_path = str(Path(initial_dir) / self.settings.get_export_filename())
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Image", initial_path, OiioAdapter.file_dialog_filter()
        )
        if not file_path:
            return

        export_spec = self.state.build_export_spec(file_path)
        issues = ValidationEngine.validate_export(
            export_spec,
            self.state.original,
            self.state.params,
            OiioAdapter.supported_extensions(),
        )
        for issue in issues:
            self._append_log(str(issue))

        if has_errors(issues):
            errors = [i.message for i in issues if i.severity == ValidationSeverity.ERROR]
            QMessageBox.critical(self, "Export Error", "\n".join(errors))
            return

        self.settings.remember_export(file_path)
        self.btn_export.setEnabled(False)
        self.export_manager.start_export(export_spec, self.state.original, self.state.params)

    def _on_export_progress(self, percent: int, message: str) -> None:
        self.statusBar().showMessage(f"{message} ({percent}%)")

    def _on_export_finished(self, success: bool, message: str) -> None:
        self.statusBar().showMessage(message, 5000)
        self._append_log(message)
        self._update_controls()
        if not success:
            QMessageBox.critical(self, "Export Error", message)

    def _append_log(self, message: str) -> None:
        """Append a line to the log panel."""
        logger.debug(message)
        self.log_text.append(message)
