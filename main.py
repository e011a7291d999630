"""
main.py — Array Algorithm Visualizer Flask App
================================================
The web server that powers the visualizer.

Routes:
  GET  /                             – main UI
  POST /api/array/generate           – generate a random array
  POST /api/run                      – validate input and start an animated run
  POST /api/playback/<action>        – play | pause | step | reset
  POST /api/run/cancel               – cancel the active run
  POST /api/config/speed             – set the speed multiplier (0.1x – 2.0x)
  POST /api/config/algo              – select an algorithm
  GET  /api/state                    – current visual state (polled by the page)
  POST /api/compare                  – benchmark two algorithms on the same array

State management:
  The animated run lives in one process-wide VisualizerSession (one
  rendering context, at most one run at a time).  Per-browser choices are
  kept in the Flask session:
    • selected_algo
    • values        – the array currently on screen
    • target        – last search target
"""

import logging
import secrets

from flask import Flask, render_template_string, request, jsonify, session

import config
from algorithms import get_algorithm, list_algorithms
from engine import (
    InputValidationError,
    RunInProgressError,
    Recorder,
    VisualizerSession,
    compare,
)
from engine.validation import generate_random_array, parse_array, parse_size, parse_target
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    array_input,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    progress_bar,
)


logging.basicConfig(
    level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
LOG = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)

VISUALIZER = VisualizerSession().start()

DEFAULT_ALGO = "insertion_sort"


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_state():
    """Return the per-browser choices as a dict."""
    return {
        "selected_algo": session.get("selected_algo", DEFAULT_ALGO),
        "values":        session.get("values", []),
        "target":        session.get("target"),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _json_body() -> dict:
    return request.get_json(silent=True) or {}


def _error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def _show_values(values):
    """Put an idle array on screen.  A running algorithm owns the canvas."""
    if not VISUALIZER.is_running:
        VISUALIZER.loop.submit("values", list(values))


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    algo_info = get_algorithm(state["selected_algo"]) or get_algorithm(DEFAULT_ALGO)
    snap = VISUALIZER.snapshot()

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_canvas(snap["values"] or state["values"], snap["tags"]),
        playback=playback_controls(
            playback_state=snap["playback_state"],
            is_running=VISUALIZER.is_running,
            speed=snap["speed"],
        ),
        algo_selector=algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=algo_info.key,
            is_running=VISUALIZER.is_running,
        ),
        array_input=array_input(
            values=state["values"],
            show_target=algo_info.is_search,
            target=state["target"],
        ),
        analytics=analytics_panel(),
        comparison=comparison_panel(),
        pseudocode=pseudocode_viewer(
            pseudocode_lines=algo_info.pseudocode,
            current_line=-1,
            algo_label=algo_info.label,
        ),
        explanation=explanation_panel(snap["status"]),
        progress=progress_bar(snap["progress"]),
        algo_keys=[a.key for a in list_algorithms()],
    )
    return html


# ---------------------------------------------------------------------------
# API: Array Input
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    data = _json_body()
    try:
        size = parse_size(str(data.get("size", config.DEFAULT_ARRAY_SIZE)))
        values = generate_random_array(size, seed=data.get("seed"))
    except InputValidationError as e:
        return _error(str(e))

    set_state(values=values)
    _show_values(values)
    return jsonify({"values": values, "svg": render_canvas(values)})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data  = _json_body()
    state = get_state()
    algo_key = data.get("algo_key", state["selected_algo"])

    try:
        values = _values_from_request(data, state)
        info = get_algorithm(algo_key)
        target = None
        if info is not None and info.is_search:
            target = parse_target(data.get("target", state["target"]))
        runner = VISUALIZER.start_run(values, algo_key, target=target)
    except InputValidationError as e:
        LOG.info("run rejected: %s", e)
        return _error(str(e))
    except RunInProgressError as e:
        return _error(str(e), 409)

    set_state(selected_algo=algo_key, values=list(values), target=target)
    return jsonify({
        "run_state": runner.state.value,
        "algo_key":  runner.info.key,
        "values":    list(values),
        "target":    target,
    })


def _values_from_request(data, state):
    if "values" in data:
        values = data["values"]
        if not isinstance(values, list):
            raise InputValidationError("'values' must be a list of integers.")
        return values
    if "text" in data:
        expected = data.get("size")
        expected = parse_size(str(expected)) if expected not in (None, "") else None
        return parse_array(data["text"], expected)
    if state["values"]:
        return state["values"]
    return parse_array("")


@app.route("/api/run/cancel", methods=["POST"])
def api_run_cancel():
    VISUALIZER.cancel_run()
    return jsonify({"cancelled": True})


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
PLAYBACK_ACTIONS = {
    "play":  VISUALIZER.play,
    "pause": VISUALIZER.pause,
    "step":  VISUALIZER.step,
    "reset": VISUALIZER.reset,
}


@app.route("/api/playback/<action>", methods=["POST"])
def api_playback(action):
    command = PLAYBACK_ACTIONS.get(action)
    if command is None:
        return _error(f"Unknown playback action: {action}", 404)
    command()
    LOG.debug("playback %s", action)
    return jsonify({"playback_state": VISUALIZER.playback_state.value})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = _json_body().get("algo_key", DEFAULT_ALGO)
    algo_info = get_algorithm(algo_key)
    if algo_info is None:
        return _error(f"Unknown algorithm: {algo_key!r}")
    set_state(selected_algo=algo_key)

    pseudocode_html = pseudocode_viewer(
        pseudocode_lines=algo_info.pseudocode,
        current_line=-1,
        algo_label=algo_info.label,
    )
    return jsonify({
        "algo":       algo_info.to_dict(),
        "is_search":  algo_info.is_search,
        "pseudocode": pseudocode_html,
    })


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = _json_body().get("speed", config.DEFAULT_SPEED)
    try:
        applied = VISUALIZER.set_speed(float(speed))
    except (TypeError, ValueError):
        return _error(f"Speed must be a number, got {speed!r}.")
    return jsonify({"speed": applied})


# ---------------------------------------------------------------------------
# API: State (polled)
# ---------------------------------------------------------------------------
@app.route("/api/state", methods=["GET"])
def api_state():
    snap = VISUALIZER.snapshot()
    algo_info = get_algorithm(snap["algo_key"] or get_state()["selected_algo"])

    snap["svg"] = render_canvas(snap["values"], snap["tags"])
    snap["explanation"] = explanation_panel(snap["status"], snap["status_log"])
    snap["progress_html"] = progress_bar(snap["progress"])
    snap["pseudocode"] = pseudocode_viewer(
        pseudocode_lines=algo_info.pseudocode if algo_info else [],
        current_line=snap["line"],
        algo_label=algo_info.label if algo_info else "",
    )
    return jsonify(snap)


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data  = _json_body()
    state = get_state()
    try:
        values = _values_from_request(data, state)
        left, right = Recorder(), Recorder()
        left.start(data.get("left", ""), values, _target_for(data.get("left"), data, state))
        right.start(data.get("right", ""), values, _target_for(data.get("right"), data, state))
    except InputValidationError as e:
        return _error(str(e))

    left.run_to_completion()
    right.run_to_completion()
    comp = compare(left, right)

    result = comp.to_dict()
    result["html"] = comparison_panel(comp)
    result["analytics"] = analytics_panel(left.metrics, left.runner.info.is_search)
    return jsonify(result)


def _target_for(algo_key, data, state):
    info = get_algorithm(algo_key or "")
    if info is None or not info.is_search:
        return None
    return parse_target(data.get("target", state["target"]))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Array Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 280px;
      max-height: 360px;
      overflow: hidden;
    }

    #pseudocode-container, #explanation-container {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow-y: auto;
    }

    h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--accent-cyan);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }

    .code-line { padding: 4px 12px; border-radius: 6px; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      box-shadow: 0 0 20px var(--glow-cyan);
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .status-history { color: var(--text-secondary); font-size: 12px; margin: 12px 0 0 18px; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel label { display: block; margin: 8px 0; font-size: 13px; color: var(--text-secondary); }
    .panel input, .panel select, .panel textarea {
      width: 100%;
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px;
    }
    .panel table { width: 100%; font-size: 13px; }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-weight: 600;
    }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); width: 100%; margin-top: 10px; }
    .hint, .placeholder { font-size: 12px; color: var(--text-secondary); }

    .progress-track {
      position: relative;
      width: 900px;
      height: 14px;
      margin-top: 12px;
      background: var(--bg-panel);
      border-radius: 7px;
      overflow: hidden;
    }
    .progress-fill { height: 100%; background: var(--accent-emerald); }
    #progress-label { position: absolute; right: 8px; top: -1px; font-size: 11px; }
    #error-banner { color: #f43f5e; font-size: 13px; min-height: 18px; margin-bottom: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="error-banner"></div>
    <div id="algo-panel">{{ algo_selector|safe }}</div>
    <div id="array-panel">{{ array_input|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
    <div id="comparison-result"></div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
      <div id="progress">{{ progress|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    const ALGO_KEYS = {{ algo_keys|tojson }};
    let pollTimer = null;

    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      document.getElementById('error-banner').textContent = body.error || '';
      return body;
    }

    function setRunning(running) {
      document.getElementById('btn-run').disabled = running;
      document.getElementById('algo-selector').disabled = running;
      ['btn-play', 'btn-step', 'btn-cancel'].forEach(id => {
        document.getElementById(id).disabled = !running;
      });
    }

    async function poll() {
      const res = await fetch('/api/state');
      const data = await res.json();
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('pseudocode').innerHTML = data.pseudocode;
      document.getElementById('explanation').innerHTML = data.explanation;
      document.getElementById('progress').innerHTML = data.progress_html;
      document.getElementById('playback-state').textContent = data.playback_state;
      const playing = data.run_state === 'running' && data.playback_state === 'running';
      document.getElementById('btn-play').textContent = playing ? '⏸' : '▶';
      document.getElementById('btn-play').dataset.playing = playing;
      const running = data.run_state === 'running';
      setRunning(running);
      if (!running && pollTimer) {
        clearInterval(pollTimer);
        pollTimer = null;
      }
    }

    function startPolling() {
      if (!pollTimer) pollTimer = setInterval(poll, 100);
    }

    // Run
    document.getElementById('btn-run').addEventListener('click', async () => {
      const data = await post('/api/run', {
        algo_key: document.getElementById('algo-selector').value,
        text: document.getElementById('array-elements').value,
        size: document.getElementById('array-size').value,
        target: document.getElementById('search-target').value,
      });
      if (!data.error) startPolling();
    });

    document.getElementById('btn-cancel').addEventListener('click', async () => {
      await post('/api/run/cancel');
      poll();
    });

    // Playback controls
    document.getElementById('btn-play').addEventListener('click', async (e) => {
      const action = e.target.dataset.playing === 'true' ? 'pause' : 'play';
      await post('/api/playback/' + action);
      poll();
    });
    document.getElementById('btn-step').addEventListener('click', async () => {
      await post('/api/playback/step');
      poll();
    });
    document.getElementById('btn-reset').addEventListener('click', async () => {
      await post('/api/playback/reset');
      setTimeout(poll, 50);
    });

    // Speed slider
    document.getElementById('speed-slider').addEventListener('input', async (e) => {
      const data = await post('/api/config/speed', {speed: +e.target.value});
      document.getElementById('speed-value').textContent = data.speed.toFixed(1) + 'x';
    });

    // Array generation
    document.getElementById('btn-generate').addEventListener('click', async () => {
      const data = await post('/api/array/generate', {
        size: document.getElementById('array-size').value,
      });
      if (data.values) {
        document.getElementById('array-elements').value = data.values.join(' ');
        document.getElementById('canvas-svg').innerHTML = data.svg;
      }
    });

    // Algorithm selector
    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      document.getElementById('target-row').style.display = data.is_search ? 'block' : 'none';
    });

    // Comparison
    ['compare-left', 'compare-right'].forEach((id, i) => {
      const sel = document.getElementById(id);
      ALGO_KEYS.forEach(k => sel.add(new Option(k, k)));
      sel.selectedIndex = i;
    });
    document.getElementById('btn-compare').addEventListener('click', async () => {
      const data = await post('/api/compare', {
        left: document.getElementById('compare-left').value,
        right: document.getElementById('compare-right').value,
        text: document.getElementById('array-elements').value,
        target: document.getElementById('search-target').value,
      });
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.html) document.getElementById('comparison-result').innerHTML = data.html;
    });

    poll();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    LOG.info("Array Algorithm Visualizer on http://%s:%d", config.HOST, config.PORT)
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT, use_reloader=False)
