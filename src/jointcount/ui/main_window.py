"""Main window: a tender and a swollen joint count side by side."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QLabel, QMainWindow, QMessageBox,
    QStatusBar, QVBoxLayout, QWidget,
)

from jointcount.anatomy.joint_catalog import AssessmentType
from jointcount.constants import ASSET_GENERATOR
from jointcount.core.errors import AssetLoadError
from jointcount.core.events import EventBus, EventType
from jointcount.core.state import Selection
from jointcount.export.snapshot_export import export_snapshot
from jointcount.ui.page import initialize
from jointcount.ui.style import LIGHT_THEME
from jointcount.ui.widgets.assessment_canvas import AssessmentCanvas

logger = logging.getLogger(__name__)

_TITLES = {
    AssessmentType.TJC: "Tender joints",
    AssessmentType.SJC: "Swollen joints",
}


def load_failure_message(error: AssetLoadError) -> str:
    return f"{error}\n\nRun {ASSET_GENERATOR} to create placeholder assets."


class MainWindow(QMainWindow):
    """Hosts one canvas per assessment type.

    Layout: [TJC column | SJC column], each a section label, the canvas and
    a read-out of the selected ids, with hover names in the status bar.
    """

    def __init__(
        self,
        event_bus: EventBus,
        selected_joints: Optional[Mapping[str, Selection]] = None,
        parent=None,
        **canvas_kwargs,
    ):
        super().__init__(parent)
        self.event_bus = event_bus
        self.setWindowTitle("JointCount - Joint Assessment")
        self.setStyleSheet(LIGHT_THEME)

        central = QWidget()
        self.setCentralWidget(central)
        row = QHBoxLayout(central)
        row.setSpacing(16)

        self._selection_labels: dict[AssessmentType, QLabel] = {}
        for kind in (AssessmentType.TJC, AssessmentType.SJC):
            column = QVBoxLayout()
            title = QLabel(_TITLES[kind].upper())
            title.setObjectName("sectionLabel")
            column.addWidget(title)

            placeholder = QWidget()
            placeholder.setProperty("class", f"jc {kind.value}")
            column.addWidget(placeholder, alignment=Qt.AlignmentFlag.AlignTop)

            label = QLabel()
            label.setObjectName("selectionLabel")
            column.addWidget(label)
            column.addStretch(1)
            self._selection_labels[kind] = label
            row.addLayout(column)

        self.canvases: list[AssessmentCanvas] = initialize(
            central, selected_joints, event_bus=event_bus, **canvas_kwargs)
        for canvas in self.canvases:
            canvas.load_failed.connect(self._on_load_failed)
            self._update_selection_label(canvas)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        event_bus.subscribe(EventType.COUNT_CHANGED, self._on_count_changed)
        event_bus.subscribe(EventType.HOVER_CHANGED, self._on_hover_changed)

        self._build_menu_bar()

    def _build_menu_bar(self) -> None:
        file_menu = self.menuBar().addMenu("&File")

        export_action = QAction("Export Snapshots...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self._on_export)
        file_menu.addAction(export_action)

        file_menu.addSeparator()
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    # ── Results ──

    def canvas_for(self, kind: AssessmentType) -> AssessmentCanvas:
        for canvas in self.canvases:
            if canvas.assessment_type is kind:
                return canvas
        raise KeyError(kind)

    def results(self) -> dict[str, list[int]]:
        """Selected ids per assessment type, e.g. ``{"tjc": [3, 9], "sjc": []}``."""
        return {c.assessment_type.value: c.state.selected_ids() for c in self.canvases}

    def export_snapshots(self, directory: Path | str) -> list[Path]:
        directory = Path(directory)
        paths = []
        for canvas in self.canvases:
            if not canvas.is_ready:
                logger.warning("Skipping %s snapshot: background not loaded",
                               canvas.assessment_type.label)
                continue
            path = directory / f"{canvas.assessment_type.value}.png"
            paths.append(export_snapshot(canvas.surface, path, canvas.state))
            self.event_bus.publish(EventType.SNAPSHOT_SAVED, path=path)
        return paths

    # ── Handlers ──

    def _update_selection_label(self, canvas: AssessmentCanvas) -> None:
        ids = canvas.state.selection_string() or "none"
        self._selection_labels[canvas.assessment_type].setText(f"Selected: {ids}")

    def _on_count_changed(self, selected: int, total: int, assessment_type: str) -> None:
        canvas = self.canvas_for(AssessmentType.parse(assessment_type))
        self._update_selection_label(canvas)

    def _on_hover_changed(self, joint_id, name: str) -> None:
        if joint_id is None:
            self.status_bar.clearMessage()
        else:
            self.status_bar.showMessage(f"{joint_id}: {name}")

    def _on_load_failed(self, error: AssetLoadError) -> None:
        QMessageBox.warning(self, "Body diagram unavailable", load_failure_message(error))

    def _on_export(self) -> None:
        directory = QFileDialog.getExistingDirectory(self, "Export Snapshots")
        if not directory:
            return
        paths = self.export_snapshots(directory)
        self.status_bar.showMessage(f"Saved {len(paths)} snapshot(s) to {directory}", 5000)
