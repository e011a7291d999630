"""
Tests for AlgorithmRunner: lifecycle, playback interaction, cancellation
and the outbound hooks observed on the rendering context.
"""

import time
import unittest
from unittest import mock

import algorithms
from algorithms import AlgoInfo
from engine.clock import AnimationSpeed
from engine.errors import InputValidationError
from engine.render import ColorTag, RenderLoop
from engine.runner import AlgorithmRunner, RunState
from tests.support import RecordingListener, wait_until


def exploding_sort(array, target, ctx):
    ctx.say("about to fail")
    ctx.pause(10)
    raise ZeroDivisionError("boom")


def late_cancel_sort(array, target, ctx):
    array.sort()
    ctx.token.cancel()
    return None


class RunnerTestCase(unittest.TestCase):

    def setUp(self):
        self.loop = RenderLoop().start()
        self.listener = RecordingListener()
        self.loop.add_listener(self.listener)

    def tearDown(self):
        self.loop.stop()

    def make_runner(self, algo_key, values, target=None, delay_scale=0):
        return AlgorithmRunner(
            algo_key, values, target=target, render_loop=self.loop, delay_scale=delay_scale,
        )

    def finish(self, runner, timeout=5.0):
        self.assertTrue(runner.join(timeout), "run did not reach a terminal state")
        self.assertTrue(self.loop.flush(timeout))
        return runner.outcome

    def highlights(self, tag):
        return [e for e in self.listener.events if e[0] == "highlight" and e[2] is tag]


class TestRunnerScenarios(RunnerTestCase):

    def test_insertion_sort_scenario(self):
        runner = self.make_runner("insertion_sort", [5, 3, 8, 1]).start()
        outcome = self.finish(runner)

        self.assertIs(outcome.state, RunState.COMPLETED)
        self.assertEqual(outcome.values, [1, 3, 5, 8])
        self.assertEqual(self.listener.names().count("completed"), 1)
        self.assertEqual(len(self.highlights(ColorTag.SORTED)), 4)

    def test_binary_search_finds_index(self):
        runner = self.make_runner("binary_search", [2, 4, 7, 9, 11], target=7).start()
        outcome = self.finish(runner)
        self.assertIs(outcome.state, RunState.COMPLETED)
        self.assertEqual(self.listener.events[-1], ("completed", 2))

    def test_binary_search_not_found(self):
        runner = self.make_runner("binary_search", [2, 4, 7, 9, 11], target=6).start()
        outcome = self.finish(runner)
        self.assertIs(outcome.state, RunState.COMPLETED)
        self.assertFalse(outcome.found)
        self.assertEqual(self.listener.events[-1], ("completed", None))

    def test_pause_then_cancel_without_step_does_not_deadlock(self):
        runner = self.make_runner("bubble_sort", [4, 3, 2, 1], delay_scale=1.0)
        runner.start()
        runner.playback.pause()
        runner.cancel()
        outcome = self.finish(runner)
        self.assertIs(outcome.state, RunState.CANCELLED)
        self.assertEqual(self.listener.names()[-1], "cancelled")


class TestRunnerPlayback(RunnerTestCase):

    def start_paused(self, algo_key, values, target=None):
        runner = self.make_runner(algo_key, values, target)
        runner.playback.pause()
        runner.start()
        self.assertTrue(wait_until(lambda: runner.playback.signal.waiting == 1))
        return runner

    def test_n_steps_pass_exactly_n_boundaries(self):
        runner = self.start_paused("selection_sort", [9, 7, 5, 3, 1, 8, 6])
        self.assertEqual(runner.playback.steps_taken, 0)

        for _ in range(3):
            runner.playback.step()
        self.assertTrue(wait_until(
            lambda: runner.playback.steps_taken == 3 and runner.playback.signal.waiting == 1
        ))
        self.assertEqual(runner.playback.signal.pending, 0)
        self.assertTrue(runner.is_active)

        runner.cancel()
        self.finish(runner)
        self.assertEqual(runner.playback.steps_taken, 3)

    def test_pause_steps_then_play_runs_to_completion(self):
        runner = self.start_paused("quick_sort", [3, 9, 1, 7, 5])
        runner.playback.step()
        runner.playback.step()
        runner.playback.play()
        outcome = self.finish(runner)
        self.assertIs(outcome.state, RunState.COMPLETED)
        self.assertEqual(outcome.values, [1, 3, 5, 7, 9])

    def test_no_highlight_or_status_after_cancel(self):
        runner = self.start_paused("insertion_sort", [5, 3, 8, 1])
        self.loop.flush()
        mark = len(self.listener.events)

        runner.cancel()
        outcome = self.finish(runner)

        self.assertIs(outcome.state, RunState.CANCELLED)
        self.assertEqual(self.listener.names(mark), ["cancelled"])
        self.assertEqual(sorted(outcome.values), [1, 3, 5, 8])

    def test_cancel_while_free_running(self):
        runner = self.make_runner("merge_sort", list(range(30, 0, -1)), delay_scale=0.01).start()
        self.assertTrue(wait_until(lambda: runner.playback.steps_taken >= 3))
        runner.cancel()
        outcome = self.finish(runner)
        self.assertIs(outcome.state, RunState.CANCELLED)
        self.assertEqual(sorted(outcome.values), list(range(1, 31)))


class TestRunnerPacing(RunnerTestCase):

    def timed_run(self, speed):
        runner = AlgorithmRunner(
            "insertion_sort", [2, 1], render_loop=self.loop,
            speed=AnimationSpeed(speed), delay_scale=0.02,
        )
        started = time.perf_counter()
        outcome = runner.run()
        self.assertIs(outcome.state, RunState.COMPLETED)
        return time.perf_counter() - started

    def test_slowest_speed_takes_about_twenty_times_the_fastest(self):
        fast = self.timed_run(2.0)
        slow = self.timed_run(0.1)
        # ideal ratio is 20; thread wake-ups only ever add to the fast run
        self.assertGreater(slow / fast, 10)
        self.assertLess(slow / fast, 25)


class TestRunnerLifecycle(RunnerTestCase):

    def test_validation_happens_before_any_thread(self):
        with self.assertRaises(InputValidationError):
            self.make_runner("binary_search", [3, 1, 2], target=1)
        with self.assertRaises(InputValidationError):
            self.make_runner("linear_search", [1, 2, 3])
        with self.assertRaises(InputValidationError):
            self.make_runner("no_such_sort", [1])

    def test_visualized_run_needs_a_loop(self):
        with self.assertRaises(ValueError):
            AlgorithmRunner("bubble_sort", [2, 1], visualize=True)

    def test_runner_cannot_start_twice(self):
        runner = self.make_runner("bubble_sort", [2, 1])
        runner.run()
        with self.assertRaises(RuntimeError):
            runner.start()

    def test_input_is_copied(self):
        values = [3, 2, 1]
        runner = self.make_runner("bubble_sort", values)
        runner.run()
        self.assertEqual(values, [3, 2, 1])
        self.assertEqual(runner.outcome.values, [1, 2, 3])

    def test_failure_is_delivered_as_outcome(self):
        info = AlgoInfo(key="exploding", label="Exploding", fn=exploding_sort, pseudocode=[])
        with mock.patch.dict(algorithms.REGISTRY, {"exploding": info}):
            runner = self.make_runner("exploding", [1, 2])
            with self.assertLogs("engine.runner", level="ERROR"):
                runner.start()
                outcome = self.finish(runner)

        self.assertIs(outcome.state, RunState.FAILED)
        self.assertEqual(outcome.error_kind, "ZeroDivisionError")
        self.assertEqual(self.listener.events[-1], ("failed", "ZeroDivisionError", "boom"))
        self.assertTrue(self.loop.is_running)

    def test_cancel_after_normal_return_keeps_the_result(self):
        info = AlgoInfo(key="late", label="Late", fn=late_cancel_sort, pseudocode=[])
        with mock.patch.dict(algorithms.REGISTRY, {"late": info}):
            outcome = self.make_runner("late", [3, 1, 2]).run()
        self.loop.flush()
        self.assertIs(outcome.state, RunState.COMPLETED)
        self.assertEqual(outcome.values, [1, 2, 3])
        self.assertEqual(self.listener.names()[-1], "completed")

    def test_counters_are_per_run(self):
        first = self.make_runner("bubble_sort", [3, 2, 1])
        first.run()
        second = self.make_runner("bubble_sort", [3, 2, 1])
        second.run()
        self.assertEqual(first.outcome.comparisons, second.outcome.comparisons)
        self.assertGreater(first.outcome.comparisons, 0)

    def test_non_visual_run_delivers_to_listener(self):
        listener = RecordingListener()
        runner = AlgorithmRunner("linear_search", [4, 8, 15], target=8, visualize=False, listener=listener)
        outcome = runner.run()
        self.assertEqual(outcome.result, 1)
        self.assertEqual(listener.events, [("completed", 1)])


if __name__ == "__main__":
    unittest.main()
