"""
Tests for the PlaybackController state machine.
"""

import threading
import unittest

from engine.errors import InternalSyncFailure
from engine.playback import PlaybackController, PlaybackState
from tests.support import wait_until


class TestPlaybackTransitions(unittest.TestCase):

    def setUp(self):
        self.pb = PlaybackController()

    def test_starts_running(self):
        self.assertIs(self.pb.state, PlaybackState.RUNNING)
        self.assertTrue(self.pb.is_playing)
        self.assertFalse(self.pb.step_pending)

    def test_pause_is_idempotent(self):
        self.pb.pause()
        self.pb.pause()
        self.assertIs(self.pb.state, PlaybackState.PAUSED)
        self.assertTrue(self.pb.is_paused)
        self.assertFalse(self.pb.signal.is_continuous)

    def test_step_from_running_pauses_then_steps(self):
        self.pb.step()
        self.assertIs(self.pb.state, PlaybackState.STEPPING_ONE)
        self.assertTrue(self.pb.step_pending)
        self.assertEqual(self.pb.signal.pending, 1)

    def test_consuming_last_permit_returns_to_paused(self):
        self.pb.pause()
        self.pb.step()
        self.pb.await_permission()
        self.assertIs(self.pb.state, PlaybackState.PAUSED)
        self.assertFalse(self.pb.step_pending)
        self.assertEqual(self.pb.steps_taken, 1)

    def test_latch_waits_for_every_granted_step(self):
        self.pb.pause()
        self.pb.step()
        self.pb.step()
        self.pb.await_permission()
        self.assertIs(self.pb.state, PlaybackState.STEPPING_ONE)
        self.pb.await_permission()
        self.assertIs(self.pb.state, PlaybackState.PAUSED)

    def test_pause_while_stepping_keeps_granted_permit(self):
        self.pb.pause()
        self.pb.step()
        self.pb.pause()
        self.assertIs(self.pb.state, PlaybackState.PAUSED)
        self.assertFalse(self.pb.step_pending)
        self.assertEqual(self.pb.signal.pending, 1)
        self.pb.await_permission()
        self.assertEqual(self.pb.steps_taken, 1)

    def test_play_releases_gate(self):
        self.pb.pause()
        self.pb.play()
        self.assertIs(self.pb.state, PlaybackState.RUNNING)
        self.pb.await_permission()
        self.pb.await_permission()
        self.assertEqual(self.pb.steps_taken, 2)

    def test_toggle_play(self):
        self.pb.toggle_play()
        self.assertIs(self.pb.state, PlaybackState.PAUSED)
        self.pb.toggle_play()
        self.assertIs(self.pb.state, PlaybackState.RUNNING)

    def test_reset_returns_to_running_and_clears_count(self):
        self.pb.pause()
        self.pb.step()
        self.pb.await_permission()
        self.pb.reset()
        self.assertIs(self.pb.state, PlaybackState.RUNNING)
        self.assertEqual(self.pb.steps_taken, 0)
        self.assertEqual(self.pb.signal.pending, 0)


class TestPlaybackThreads(unittest.TestCase):

    def test_interrupt_raises_internal_sync_failure_in_waiter(self):
        pb = PlaybackController()
        pb.pause()
        errors = []

        def worker():
            try:
                pb.await_permission()
            except InternalSyncFailure as exc:
                errors.append(exc)

        t = threading.Thread(target=worker, daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: pb.signal.waiting == 1))
        pb.interrupt()
        t.join(2.0)
        self.assertEqual(len(errors), 1)
        self.assertEqual(pb.steps_taken, 0)

    def test_reset_releases_blocked_waiter(self):
        pb = PlaybackController()
        pb.pause()
        t = threading.Thread(target=pb.await_permission, daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: pb.signal.waiting == 1))
        pb.reset()
        t.join(2.0)
        self.assertFalse(t.is_alive())


if __name__ == "__main__":
    unittest.main()
