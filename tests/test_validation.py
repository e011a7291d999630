"""
Tests for input parsing and pre-run validation.
"""

import unittest

import config
from engine.errors import InputValidationError, VisualizerError
from engine.validation import (
    generate_random_array,
    parse_array,
    parse_size,
    parse_target,
    validate_run,
)


class TestParsing(unittest.TestCase):

    def test_parse_array_accepts_spaces_and_commas(self):
        self.assertEqual(parse_array("5 3, 8;1"), [5, 3, 8, 1])
        self.assertEqual(parse_array("  -4\n 2  "), [-4, 2])

    def test_parse_array_rejects_garbage(self):
        with self.assertRaises(InputValidationError):
            parse_array("1 two 3")
        with self.assertRaises(InputValidationError):
            parse_array("   ")
        with self.assertRaises(InputValidationError):
            parse_array("1.5 2")

    def test_parse_array_checks_expected_size(self):
        self.assertEqual(parse_array("1 2 3", expected_size=3), [1, 2, 3])
        with self.assertRaises(InputValidationError):
            parse_array("1 2 3", expected_size=4)

    def test_parse_size_bounds(self):
        self.assertEqual(parse_size(" 12 "), 12)
        for bad in ("0", "-3", str(config.MAX_ARRAY_SIZE + 1), "ten", ""):
            with self.subTest(text=bad):
                with self.assertRaises(InputValidationError):
                    parse_size(bad)

    def test_parse_target(self):
        self.assertEqual(parse_target(" 7 "), 7)
        self.assertEqual(parse_target(-2), -2)
        with self.assertRaises(InputValidationError):
            parse_target("")
        with self.assertRaises(InputValidationError):
            parse_target(None)
        with self.assertRaises(InputValidationError):
            parse_target("x")

    def test_validation_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse_array("nope")
        self.assertTrue(issubclass(InputValidationError, VisualizerError))


class TestGenerate(unittest.TestCase):

    def test_size_and_range(self):
        values = generate_random_array(25, seed=1)
        self.assertEqual(len(values), 25)
        self.assertTrue(all(0 <= v <= config.RANDOM_VALUE_MAX for v in values))

    def test_seed_is_reproducible(self):
        self.assertEqual(generate_random_array(10, seed=3), generate_random_array(10, seed=3))

    def test_bad_size(self):
        with self.assertRaises(InputValidationError):
            generate_random_array(0)


class TestValidateRun(unittest.TestCase):

    def test_returns_algo_info(self):
        info = validate_run([3, 1, 2], "quick_sort")
        self.assertEqual(info.key, "quick_sort")

    def test_unknown_algorithm(self):
        with self.assertRaises(InputValidationError):
            validate_run([1], "sleep_sort")

    def test_empty_and_oversize(self):
        with self.assertRaises(InputValidationError):
            validate_run([], "bubble_sort")
        with self.assertRaises(InputValidationError):
            validate_run([1] * (config.MAX_ARRAY_SIZE + 1), "bubble_sort")

    def test_non_integer_elements(self):
        with self.assertRaises(InputValidationError):
            validate_run([1, "2"], "bubble_sort")
        with self.assertRaises(InputValidationError):
            validate_run([1, True], "bubble_sort")
        with self.assertRaises(InputValidationError):
            validate_run([1, 2.5], "bubble_sort")

    def test_search_needs_target(self):
        with self.assertRaises(InputValidationError):
            validate_run([1, 2], "linear_search")
        with self.assertRaises(InputValidationError):
            validate_run([1, 2], "linear_search", target="2")
        validate_run([1, 2], "linear_search", target=2)

    def test_negative_values_rejected_for_radix(self):
        with self.assertRaises(InputValidationError):
            validate_run([3, -1], "radix_sort")
        validate_run([3, -1], "heap_sort")
        validate_run([3, -1], "counting_sort")

    def test_counting_sort_value_range_is_capped(self):
        with self.assertRaises(InputValidationError):
            validate_run([0, 10 ** 9], "counting_sort")
        with self.assertRaises(InputValidationError):
            validate_run([-5, config.MAX_VALUE_RANGE - 5], "counting_sort")
        validate_run([-5, config.MAX_VALUE_RANGE - 6], "counting_sort")
        # radix sort makes one pass per digit, so large magnitudes are fine
        validate_run([0, 10 ** 9], "radix_sort")

    def test_binary_search_requires_sorted_input(self):
        with self.assertRaises(InputValidationError):
            validate_run([3, 1, 2], "binary_search", target=1)
        validate_run([1, 2, 2, 3], "binary_search", target=2)


if __name__ == "__main__":
    unittest.main()
