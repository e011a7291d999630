"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause/step/reset/cancel + speed slider
  • algorithm_selector  – dropdown + run button
  • array_input         – size, elements, random generator, search target
  • analytics_panel     – comparisons, writes, wall time, result
  • comparison_panel    – side-by-side metrics of two benchmark runs
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – current status message plus recent history
  • progress_bar        – fraction of the run reported so far

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Optional, List

import config
from algorithms import AlgoInfo
from engine import ComparisonResult, PlaybackState, RunMetrics


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    playback_state: str = PlaybackState.RUNNING.value,
    is_running: bool = False,
    speed: float = config.DEFAULT_SPEED,
) -> str:
    is_playing = is_running and playback_state == PlaybackState.RUNNING.value
    play_icon  = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    disabled   = "" if is_running else "disabled"

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-play" title="{play_label}" data-playing="{str(is_playing).lower()}" {disabled}>{play_icon}</button>
        <button id="btn-step" title="Advance one step" {disabled}>⏭</button>
        <button id="btn-reset" title="Reset to the original array">⏮</button>
        <button id="btn-cancel" title="Cancel the run" {disabled}>✖</button>
      </div>
      <div class="step-info">
        State: <span id="playback-state">{playback_state}</span>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <input type="range" id="speed-slider" min="{config.MIN_SPEED}" max="{config.MAX_SPEED}"
               step="0.1" value="{speed}">
        <span id="speed-value">{speed:.1f}x</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "insertion_sort",
    is_running: bool = False,
) -> str:
    sorts, searches = [], []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        option = (
            f'<option value="{algo.key}" data-search="{str(algo.is_search).lower()}" {sel}>'
            f'{algo.label} — {algo.complexity_time}</option>'
        )
        (searches if algo.is_search else sorts).append(option)

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {'disabled' if is_running else ''}>
        <optgroup label="Sorting">{''.join(sorts)}</optgroup>
        <optgroup label="Searching">{''.join(searches)}</optgroup>
      </select>
      <button id="btn-run" class="btn-primary" {'disabled' if is_running else ''}>▶ Run Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Input
# ---------------------------------------------------------------------------
def array_input(
    values: Optional[List[int]] = None,
    show_target: bool = False,
    target: Optional[int] = None,
) -> str:
    values = values or []
    size   = len(values) or config.DEFAULT_ARRAY_SIZE
    text   = " ".join(str(v) for v in values)

    return f"""
    <div class="panel array-input">
      <h3>🔢 Array</h3>
      <label>Size: <input type="number" id="array-size" value="{size}" min="1" max="{config.MAX_ARRAY_SIZE}"></label>
      <button id="btn-generate" class="btn-secondary">Generate Random</button>
      <label>Elements:
        <textarea id="array-elements" rows="3" placeholder="5 3 8 1 9 2">{escape(text)}</textarea>
      </label>
      <label id="target-row" style="display: {'block' if show_target else 'none'};">Search Target:
        <input type="number" id="search-target" value="{'' if target is None else target}">
      </label>
      <p class="hint">Separate values with spaces or commas. Binary search needs ascending input.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None, is_search: bool = False) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    if not metrics.completed:
        result_row = "⚠️ Did not complete"
    elif is_search:
        result_row = "❌ Not Found" if metrics.result is None else f"✅ Found at index {metrics.result}"
    else:
        result_row = "✅ Sorted"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.size}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.writes}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{result_row}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Benchmark two algorithms on the same array to compare.</p>
          <select id="compare-left"></select>
          <select id="compare-right"></select>
          <button id="btn-compare" class="btn-secondary">Compare</button>
        </div>
        """

    left  = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Writes</td>
            <td>{left.writes}</td>
            <td>{right.writes}</td>
            <td>{winner_badge(comp.winner_writes)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>{winner_badge(comp.winner_time)}</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    title = f'<div class="code-title">{escape(algo_label)}</div>' if algo_label else ''
    return f"""
    <div class="code-block">
      {title}
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "", history: Optional[List[str]] = None) -> str:
    if not explanation:
        explanation = "▶ Click <strong>Run Algorithm</strong> to see step-by-step explanations of what's happening at each stage."
    else:
        explanation = escape(explanation)

    recent = ""
    if history:
        items = "".join(f"<li>{escape(msg)}</li>" for msg in history[-5:])
        recent = f'<ul class="status-history">{items}</ul>'

    return f"""<div class="explanation-text">{explanation}</div>{recent}"""


# ---------------------------------------------------------------------------
# Progress Bar
# ---------------------------------------------------------------------------
def progress_bar(fraction: float = 0.0) -> str:
    pct = round(max(0.0, min(1.0, fraction)) * 100)
    return f"""
    <div class="progress-track">
      <div class="progress-fill" id="progress-fill" style="width: {pct}%;"></div>
      <span id="progress-label">{pct}%</span>
    </div>
    """
