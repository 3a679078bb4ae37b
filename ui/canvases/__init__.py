"""
Matplotlib canvas widgets for telemetry visualization.
"""
from ui.canvases.multi_line import MultiLineCanvas

__all__ = ['MultiLineCanvas']
