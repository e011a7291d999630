"""Shared helpers for the threaded tests."""

import time

from engine.render import RenderListener


def wait_until(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.002)
    return predicate()


class RecordingListener(RenderListener):
    """Collects every outbound hook call as a (name, args) tuple."""

    def __init__(self):
        self.events = []

    def on_values_changed(self, values):
        self.events.append(("values", list(values)))

    def on_highlight(self, index, tag):
        self.events.append(("highlight", index, tag))

    def on_reset_highlights(self):
        self.events.append(("reset_all",))

    def on_status(self, message):
        self.events.append(("status", message))

    def on_progress(self, fraction):
        self.events.append(("progress", fraction))

    def on_line(self, line):
        self.events.append(("line", line))

    def on_completed(self, result):
        self.events.append(("completed", result))

    def on_cancelled(self):
        self.events.append(("cancelled",))

    def on_failed(self, kind, message):
        self.events.append(("failed", kind, message))

    def names(self, start=0):
        return [e[0] for e in self.events[start:]]
