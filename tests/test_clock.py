"""
Tests for AnimationSpeed bounds and AnimationClock pacing.
"""

import threading
import time
import unittest

import config
from engine.cancellation import CancellationToken
from engine.clock import AnimationClock, AnimationSpeed
from engine.playback import PlaybackController
from tests.support import wait_until


class TestAnimationSpeed(unittest.TestCase):

    def test_default(self):
        self.assertEqual(AnimationSpeed().get(), config.DEFAULT_SPEED)

    def test_out_of_range_values_are_clamped(self):
        speed = AnimationSpeed()
        self.assertEqual(speed.set(5.0), config.MAX_SPEED)
        self.assertEqual(speed.value, config.MAX_SPEED)
        self.assertEqual(speed.set(0.0), config.MIN_SPEED)
        self.assertEqual(speed.set(-3), config.MIN_SPEED)

    def test_in_range_value_is_kept(self):
        speed = AnimationSpeed(0.5)
        self.assertAlmostEqual(speed.get(), 0.5)


class TestAnimationClock(unittest.TestCase):

    def make_clock(self, speed=1.0, delay_scale=1.0):
        self.playback = PlaybackController()
        self.token = CancellationToken()
        return AnimationClock(self.playback, self.token, AnimationSpeed(speed), delay_scale)

    def test_delay_scales_inversely_with_speed(self):
        fast = self.make_clock(speed=2.0)
        slow = self.make_clock(speed=0.5)
        self.assertAlmostEqual(fast.delay_seconds(800), 0.4)
        self.assertAlmostEqual(slow.delay_seconds(800), 1.6)
        self.assertAlmostEqual(slow.delay_seconds(800) / fast.delay_seconds(800), 4.0)

    def test_delay_scale_multiplies_every_delay(self):
        clock = self.make_clock(speed=1.0, delay_scale=0.01)
        self.assertAlmostEqual(clock.delay_seconds(1000), 0.01)

    def test_speed_change_applies_to_next_wait(self):
        clock = self.make_clock(speed=1.0)
        clock.speed.set(2.0)
        self.assertAlmostEqual(clock.delay_seconds(100), 0.05)

    def test_wait_returns_true_while_running(self):
        clock = self.make_clock(delay_scale=0)
        self.assertTrue(clock.wait(500))
        self.assertEqual(self.playback.steps_taken, 1)

    def test_wait_returns_false_once_cancelled(self):
        clock = self.make_clock(delay_scale=0)
        self.token.cancel()
        self.assertFalse(clock.wait(500))
        self.assertEqual(self.playback.steps_taken, 0)

    def test_cancel_interrupts_the_sleep(self):
        clock = self.make_clock(speed=0.1, delay_scale=1.0)
        result = []
        t = threading.Thread(target=lambda: result.append(clock.wait(1000)), daemon=True)
        started = time.monotonic()
        t.start()
        time.sleep(0.05)
        self.token.cancel()
        t.join(2.0)
        self.assertEqual(result, [False])
        self.assertLess(time.monotonic() - started, 2.0)

    def test_paused_wait_blocks_until_step(self):
        clock = self.make_clock(delay_scale=0)
        self.playback.pause()
        result = []
        t = threading.Thread(target=lambda: result.append(clock.wait(100)), daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: self.playback.signal.waiting == 1))
        self.assertEqual(result, [])
        self.playback.step()
        t.join(2.0)
        self.assertEqual(result, [True])

    def test_interrupted_wait_without_cancel_cancels_the_token(self):
        clock = self.make_clock(delay_scale=0)
        self.playback.pause()
        result = []
        t = threading.Thread(target=lambda: result.append(clock.wait(100)), daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: self.playback.signal.waiting == 1))
        with self.assertLogs("engine.clock", level="WARNING"):
            self.playback.interrupt()
            t.join(2.0)
        self.assertEqual(result, [False])
        self.assertTrue(self.token.cancelled)
        self.assertEqual(self.token.reason, "sync-failure")


if __name__ == "__main__":
    unittest.main()
