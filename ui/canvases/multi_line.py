"""
Multi-line time series canvas for hardware telemetry.
"""
import math

import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ui.styles import BG_COLOR, BG_COLOR_LIGHT, GRID_COLOR, TEXT_COLOR_DARK, TEXT_COLOR_DIM, css_to_rgba

# Upper bound on x tick labels drawn at once
MAX_X_TICKS = 12


class MultiLineCanvas(FigureCanvas):
    """
    Matplotlib canvas drawing a SeriesCollection.

    Each dataset is one line, filled down to zero with its background color.
    The X-axis is categorical: one slot per kept row, labelled with its Time.
    """

    def __init__(self, title: str, parent=None, width=10, height=5, dpi=100):
        """
        Initialize multi-line canvas.

        Args:
            title: Chart title
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.fig.patch.set_facecolor(BG_COLOR)

        self.title = title
        self.lines = []
        self._style_axes()
        self._draw_empty_hint()

        self.fig.tight_layout(pad=0.8)

    def _style_axes(self):
        """Re-apply the dark theme; ``ax.clear()`` resets it."""
        self.ax.set_facecolor(BG_COLOR_LIGHT)
        for spine in self.ax.spines.values():
            spine.set_color(TEXT_COLOR_DIM)
        self.ax.tick_params(colors=TEXT_COLOR_DIM, labelsize=7)
        self.ax.xaxis.label.set_color(TEXT_COLOR_DIM)
        self.ax.yaxis.label.set_color(TEXT_COLOR_DIM)
        self.ax.title.set_color("#FFFFFF")

        self.ax.set_title(self.title, fontsize=9)
        self.ax.grid(True, color=GRID_COLOR, alpha=0.6)
        self.ax.set_xlabel("Time", fontsize=7)

    def _draw_empty_hint(self):
        self.ax.text(
            0.5, 0.5, "No data loaded",
            transform=self.ax.transAxes,
            ha="center", va="center",
            color=TEXT_COLOR_DARK, fontsize=10,
        )

    def update_collection(self, collection):
        """
        Redraw from scratch with the given SeriesCollection.

        None values become gaps in both the line and its fill.
        """
        self.ax.clear()
        self.lines = []
        self._style_axes()

        if collection.is_empty:
            self._draw_empty_hint()
            self.draw()
            return

        x = np.arange(len(collection.labels))

        for dataset in collection.datasets:
            y = np.array([np.nan if v is None else v for v in dataset.data], dtype=float)
            line, = self.ax.plot(
                x, y,
                linewidth=1.5,
                color=css_to_rgba(dataset.border_color),
                label=dataset.label,
            )
            self.lines.append(line)
            if dataset.fill:
                self.ax.fill_between(x, y, 0, color=css_to_rgba(dataset.background_color), linewidth=0)

        step = max(1, math.ceil(len(x) / MAX_X_TICKS))
        ticks = x[::step]
        self.ax.set_xticks(ticks)
        self.ax.set_xticklabels(
            ["" if collection.labels[i] is None else collection.labels[i] for i in ticks],
            rotation=30, ha="right",
        )
        self.ax.set_xlim(x[0], max(x[-1], x[0] + 1))

        self.ax.legend(loc="upper right", fontsize=7, framealpha=0.8)
        self.fig.tight_layout(pad=0.8)
        self.draw()
