"""
Tests for the permit gate between the UI thread and the algorithm thread.
"""

import threading
import unittest

from engine.step_signal import StepSignal
from tests.support import wait_until


class TestStepSignal(unittest.TestCase):

    def test_continuous_mode_never_blocks(self):
        signal = StepSignal()
        for _ in range(5):
            self.assertTrue(signal.await_permission())
        self.assertEqual(signal.pending, 0)

    def test_permits_granted_before_the_wait_are_kept(self):
        signal = StepSignal()
        signal.block()
        signal.grant_one()
        signal.grant_one()
        self.assertEqual(signal.pending, 2)

        self.assertTrue(signal.await_permission())
        self.assertTrue(signal.await_permission())
        self.assertEqual(signal.pending, 0)

    def test_gated_wait_blocks_until_one_permit(self):
        signal = StepSignal()
        signal.block()
        passed = []

        def worker():
            passed.append(signal.await_permission())

        t = threading.Thread(target=worker, daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: signal.waiting == 1))
        self.assertEqual(passed, [])

        signal.grant_one()
        t.join(2.0)
        self.assertEqual(passed, [True])
        self.assertEqual(signal.waiting, 0)

    def test_interrupt_refuses_waiters_and_later_calls(self):
        signal = StepSignal()
        signal.block()
        results = []
        t = threading.Thread(target=lambda: results.append(signal.await_permission()), daemon=True)
        t.start()
        self.assertTrue(wait_until(lambda: signal.waiting == 1))

        signal.interrupt()
        t.join(2.0)
        self.assertEqual(results, [False])
        self.assertFalse(signal.await_permission())
        self.assertTrue(signal.is_interrupted)

    def test_reset_clears_interrupt_and_permits(self):
        signal = StepSignal()
        signal.block()
        signal.grant_one()
        signal.interrupt()
        signal.reset()

        self.assertFalse(signal.is_interrupted)
        self.assertTrue(signal.is_continuous)
        self.assertEqual(signal.pending, 0)
        self.assertTrue(signal.await_permission())

    def test_grant_continuous_drops_leftover_permits(self):
        signal = StepSignal()
        signal.grant_one()
        signal.grant_one()
        signal.grant_continuous()
        self.assertEqual(signal.pending, 0)
        self.assertTrue(signal.is_continuous)


if __name__ == "__main__":
    unittest.main()
