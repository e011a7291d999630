"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, render_model, bar_color, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_input,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    progress_bar,
)

__all__ = [
    "render_canvas",
    "render_model",
    "bar_color",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_input",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "progress_bar",
]
