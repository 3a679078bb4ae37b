"""
Main window for the HWiNFO CSV graph viewer.
"""
import logging
import os

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QAction,
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from config import GRANULARITY_STEP, MAX_GRANULARITY
from telemetry.controller import SeriesController
from ui.canvases import MultiLineCanvas
from ui.styles import DARK_STYLESHEET

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Import window: pick a HWiNFO CSV export and plot it.

    Displays:
    - Open button and granularity slider
    - CPU/GPU usage and temperature chart
    - Status line (file, rows loaded, points shown)
    """

    def __init__(self, settings=None):
        super().__init__()

        self.setWindowTitle("HWiNFO Graph")
        self.resize(1200, 700)

        self.current_path = None
        self.controller = SeriesController(settings=settings)

        central = QWidget()
        self.setCentralWidget(central)

        self._create_menu_bar()

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(8, 24, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addWidget(self._build_controls())
        root_layout.addWidget(self._build_chart(), 1)

        self.status_label = QLabel("No file loaded")
        self.status_label.setStyleSheet("color: #888888;")
        root_layout.addWidget(self.status_label)

        self.setStyleSheet(DARK_STYLESHEET)

        # Wire after widgets exist so the first rebuild has a canvas to draw on
        self.controller.add_listener(self.handle_collection_update)

    def _build_controls(self):
        """Build the import controls: open button + granularity slider."""
        group = QGroupBox("Import HWiNFO CSV Data")
        layout = QHBoxLayout()
        group.setLayout(layout)

        self.open_button = QPushButton("Open CSV...")
        self.open_button.clicked.connect(self.choose_file)
        layout.addWidget(self.open_button)

        layout.addSpacing(20)

        self.granularity_label = QLabel()
        layout.addWidget(self.granularity_label)

        self.granularity_slider = QSlider(QtCore.Qt.Horizontal)
        self.granularity_slider.setRange(0, MAX_GRANULARITY)
        self.granularity_slider.setSingleStep(GRANULARITY_STEP)
        self.granularity_slider.setPageStep(GRANULARITY_STEP)
        self.granularity_slider.setTickInterval(GRANULARITY_STEP)
        self.granularity_slider.setTickPosition(QSlider.TicksBelow)
        self.granularity_slider.setValue(0)
        self.granularity_slider.valueChanged.connect(self.handle_granularity_change)
        layout.addWidget(self.granularity_slider, 1)

        self._update_granularity_label(0)
        return group

    def _build_chart(self):
        """Build the chart panel."""
        group = QGroupBox("Hardware Telemetry")
        layout = QVBoxLayout()
        group.setLayout(layout)

        self.chart_canvas = MultiLineCanvas("CPU / GPU Usage and Temperature", self)
        layout.addWidget(self.chart_canvas)
        return group

    def _create_menu_bar(self):
        """Create menu bar."""
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")

        open_action = QAction("Open CSV...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.choose_file)
        file_menu.addAction(open_action)

        file_menu.addSeparator()

        quit_action = QAction("Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    # ==========================================================================
    # Input handlers
    # ==========================================================================

    def choose_file(self):
        """Ask for a CSV file and load it."""
        path, _ = QFileDialog.getOpenFileName(
            self, "Open HWiNFO CSV", "", "CSV files (*.csv)"
        )
        if path:
            self.open_csv(path)

    def open_csv(self, path) -> bool:
        """
        Load a CSV file into the chart.

        Args:
            path: Path to the CSV export

        Returns:
            True if the file could be read (even if it held no usable rows)
        """
        try:
            rows = self.controller.load(path)
        except OSError as e:
            logger.error(f"Could not open {path}: {e}", exc_info=True)
            self.status_label.setText(f"Could not open {path}")
            return False

        self.current_path = path
        logger.info(f"Opened {path} ({rows} rows)")
        self._update_status()
        return True

    def set_granularity(self, value: int):
        """Move the slider; the change handler does the rest."""
        self.granularity_slider.setValue(value)

    def handle_granularity_change(self, value: int):
        # Dragging can land between ticks; snap to the step like a range input
        snapped = round(value / GRANULARITY_STEP) * GRANULARITY_STEP
        if snapped != value:
            self.granularity_slider.setValue(snapped)
            return

        self._update_granularity_label(value)
        self.controller.set_granularity(value)

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def handle_collection_update(self, collection):
        """
        Redraw the chart with a freshly built series collection.

        Args:
            collection: SeriesCollection from the controller
        """
        try:
            self.chart_canvas.update_collection(collection)
        except Exception as e:
            logger.error(f"Error in chart update: {e}", exc_info=True)
        self._update_status()

    def _update_granularity_label(self, value: int):
        self.granularity_label.setText(f"Data Granularity: {value} seconds")

    def _update_status(self):
        if self.current_path is None:
            self.status_label.setText("No file loaded")
            return
        self.status_label.setText(
            f"{os.path.basename(str(self.current_path))}: "
            f"{len(self.controller.records)} rows loaded, "
            f"{len(self.controller.collection)} points shown"
        )
