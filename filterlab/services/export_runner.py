"""
Threaded export runner.

Runs in a QRunnable, emits progress/log signals.
Renders the original through the same pipeline as the preview and writes
the result with OpenImageIO.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from ..core import Bitmap, ExportSpec
from ..oiio import OiioAdapter
from ..processing import FilterParameters, render
from ..utils.logging import logger


class ExportSignals(QObject):
    """Signals emitted by ExportRunner."""
    progress = Signal(int, str)  # (percent, message)
    finished = Signal(bool, str)  # (success, final_message)
    log = Signal(str)  # log message


class ExportRunner(QRunnable):
    """Runnable for a single export."""

    def __init__(
        self,
        export_spec: ExportSpec,
        original: Bitmap,
        params: FilterParameters,
    ):
        super().__init__()
        self.export_spec = export_spec
        self.original = original
        # Snapshot so later slider moves cannot change this export
        self.params = params.copy()
        self.signals = ExportSignals()

    def run(self) -> None:
        """Render and write the image."""
        output_path = Path(self.export_spec.output_path)
        try:
            self._log(f"Exporting {self.original.width}x{self.original.height} image to {output_path}")
            self.signals.progress.emit(10, "Rendering...")

            result = render(self.original, self.params)
            self.signals.progress.emit(60, "Writing...")

            output_path.parent.mkdir(parents=True, exist_ok=True)
            OiioAdapter.write_bitmap(result, output_path)

            self.signals.progress.emit(100, "Done")
            self._log(f"[OK] Saved {output_path}")
            self.signals.finished.emit(True, f"Exported to {output_path}")

        except Exception as e:
            logger.exception("Export to %s failed", output_path)
            self._log(f"[ERROR] Export failed: {e}")
            self.signals.finished.emit(False, f"Export failed: {e}")

    def _log(self, message: str) -> None:
        """Emit a log message."""
        logger.info(message)
        self.signals.log.emit(message)


class ExportManager(QObject):
    """Manages the export thread pool."""

    finished = Signal(bool, str)  # (success, message)
    log = Signal(str)
    progress = Signal(int, str)  # (percent, message)

    def __init__(self):
        super().__init__()
        self.thread_pool = QThreadPool()
        self.current_runner: Optional[ExportRunner] = None

    def is_running(self) -> bool:
        """Check if an export is in progress."""
        return self.current_runner is not None

    def start_export(
        self,
        export_spec: ExportSpec,
        original: Bitmap,
        params: FilterParameters,
    ) -> bool:
        """Start an export in a worker thread. Returns False if one is already running."""
        if self.current_runner:
            self.log.emit("Export already in progress")
            return False

        self.current_runner = ExportRunner(export_spec, original, params)
        self.current_runner.signals.finished.connect(self._on_finished)
        self.current_runner.signals.log.connect(self.log.emit)
        self.current_runner.signals.progress.connect(self.progress.emit)

        self.thread_pool.start(self.current_runner)
        return True

    def _on_finished(self, success: bool, message: str) -> None:
        """Handle export completion."""
        self.current_runner = None
        self.finished.emit(success, message)
