"""
Tests for the Flask routes, driven through Flask's test client.
"""

import unittest

import main


class AppTestCase(unittest.TestCase):

    def setUp(self):
        main.app.config["TESTING"] = True
        self.client = main.app.test_client()
        self.visualizer = main.VISUALIZER
        self.visualizer.delay_scale = 0
        self.visualizer.set_speed(1.0)

    def tearDown(self):
        self.visualizer.cancel_run()
        self.visualizer.wait(5.0)

    def post(self, url, payload=None):
        return self.client.post(url, json=payload or {})


class TestPages(AppTestCase):

    def test_index_renders(self):
        res = self.client.get("/")
        self.assertEqual(res.status_code, 200)
        body = res.get_data(as_text=True)
        self.assertIn("Array Algorithm Visualizer", body)
        self.assertIn('id="algo-selector"', body)
        self.assertIn('id="speed-slider"', body)


class TestArrayAndConfig(AppTestCase):

    def test_generate_random_array(self):
        res = self.post("/api/array/generate", {"size": 8, "seed": 4})
        self.assertEqual(res.status_code, 200)
        data = res.get_json()
        self.assertEqual(len(data["values"]), 8)
        self.assertIn("<svg", data["svg"])

    def test_generate_rejects_bad_size(self):
        res = self.post("/api/array/generate", {"size": "lots"})
        self.assertEqual(res.status_code, 400)
        self.assertIn("error", res.get_json())

    def test_select_algorithm(self):
        res = self.post("/api/config/algo", {"algo_key": "binary_search"})
        self.assertEqual(res.status_code, 200)
        data = res.get_json()
        self.assertTrue(data["is_search"])
        self.assertIn("code-line", data["pseudocode"])

        res = self.post("/api/config/algo", {"algo_key": "nope"})
        self.assertEqual(res.status_code, 400)

    def test_speed_is_clamped(self):
        res = self.post("/api/config/speed", {"speed": 7})
        self.assertEqual(res.get_json()["speed"], 2.0)
        res = self.post("/api/config/speed", {"speed": "fast"})
        self.assertEqual(res.status_code, 400)

    def test_unknown_playback_action(self):
        res = self.post("/api/playback/rewind")
        self.assertEqual(res.status_code, 404)


class TestRuns(AppTestCase):

    def test_run_and_poll_state(self):
        res = self.post("/api/run", {"algo_key": "insertion_sort", "values": [5, 3, 8, 1]})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.get_json()["algo_key"], "insertion_sort")
        self.assertTrue(self.visualizer.wait(5.0))

        state = self.client.get("/api/state").get_json()
        self.assertEqual(state["values"], [1, 3, 5, 8])
        self.assertEqual(state["run_state"], "completed")
        self.assertEqual(state["outcome"], "completed")
        self.assertEqual(state["tags"], ["sorted"] * 4)
        self.assertIn("<svg", state["svg"])
        self.assertIn("code-line", state["pseudocode"])

    def test_run_from_text(self):
        res = self.post("/api/run", {
            "algo_key": "linear_search", "text": "4, 8, 15, 16", "size": "4", "target": "15",
        })
        self.assertEqual(res.status_code, 200)
        self.assertTrue(self.visualizer.wait(5.0))
        self.assertEqual(self.client.get("/api/state").get_json()["result"], 2)

    def test_validation_errors_are_400(self):
        cases = [
            {"algo_key": "binary_search", "values": [3, 1, 2], "target": 1},
            {"algo_key": "linear_search", "values": [3, 1, 2]},
            {"algo_key": "radix_sort", "values": [3, -1]},
            {"algo_key": "counting_sort", "values": [0, 10 ** 9]},
            {"algo_key": "bubble_sort", "text": "1 2 x"},
            {"algo_key": "bubble_sort", "text": "1 2 3", "size": "5"},
            {"algo_key": "bubble_sort", "values": "1 2 3"},
            {"algo_key": "made_up", "values": [1]},
        ]
        for payload in cases:
            with self.subTest(payload=payload):
                res = self.post("/api/run", payload)
                self.assertEqual(res.status_code, 400)
                self.assertIn("error", res.get_json())

    def test_second_run_while_active_is_409(self):
        self.visualizer.delay_scale = 1.0
        res = self.post("/api/run", {"algo_key": "bubble_sort", "values": [4, 3, 2, 1]})
        self.assertEqual(res.status_code, 200)

        res = self.post("/api/run", {"algo_key": "bubble_sort", "values": [2, 1]})
        self.assertEqual(res.status_code, 409)

        res = self.post("/api/run/cancel")
        self.assertEqual(res.status_code, 200)
        self.assertTrue(self.visualizer.wait(5.0))
        self.assertEqual(self.client.get("/api/state").get_json()["run_state"], "cancelled")

    def test_pause_step_play_over_http(self):
        self.visualizer.delay_scale = 1.0
        self.post("/api/run", {"algo_key": "selection_sort", "values": [3, 1, 2]})
        res = self.post("/api/playback/pause")
        self.assertEqual(res.get_json()["playback_state"], "paused")
        res = self.post("/api/playback/step")
        self.assertIn(res.get_json()["playback_state"], ("stepping", "paused"))

        self.visualizer.delay_scale = 0
        self.visualizer.runner.clock.delay_scale = 0
        self.post("/api/playback/play")
        self.assertTrue(self.visualizer.wait(5.0))
        self.assertEqual(self.client.get("/api/state").get_json()["values"], [1, 2, 3])

    def test_reset_restores_input(self):
        self.visualizer.delay_scale = 1.0
        self.post("/api/run", {"algo_key": "heap_sort", "values": [7, 2, 5]})
        self.post("/api/playback/pause")
        res = self.post("/api/playback/reset")
        self.assertEqual(res.get_json()["playback_state"], "running")
        self.assertTrue(self.visualizer.wait(5.0))

        state = self.client.get("/api/state").get_json()
        self.assertEqual(state["values"], [7, 2, 5])
        self.assertEqual(state["run_state"], "cancelled")


class TestCompare(AppTestCase):

    def test_compare_two_sorts(self):
        res = self.post("/api/compare", {
            "left": "insertion_sort", "right": "merge_sort", "values": list(range(15, 0, -1)),
        })
        self.assertEqual(res.status_code, 200)
        data = res.get_json()
        self.assertEqual(data["left"]["algo_key"], "insertion_sort")
        self.assertEqual(data["winner_comparisons"], "Merge Sort")
        self.assertIn("comparison-table", data["html"])

    def test_compare_search_uses_target(self):
        res = self.post("/api/compare", {
            "left": "linear_search", "right": "binary_search",
            "values": [1, 3, 5, 7, 9], "target": 9,
        })
        data = res.get_json()
        self.assertEqual(data["left"]["result"], 4)
        self.assertEqual(data["right"]["result"], 4)

    def test_compare_rejects_bad_input(self):
        res = self.post("/api/compare", {"left": "bubble_sort", "right": "", "values": [1, 2]})
        self.assertEqual(res.status_code, 400)


if __name__ == "__main__":
    unittest.main()
