from __future__ import annotations

import unittest
from unittest import mock

from block_check import (
    DEFAULT_POLICY,
    AnalysisFailure,
    AnalysisSuccess,
    AnalyzePassword,
    LengthError,
    PasswordAnalyzer,
    PasswordPolicy,
    ValidationError,
    WhitespaceError,
    analyze,
    classify,
    longest_run,
    validate,
)
from block_check.domain.blocks import find_longest_block


class ValidationTests(unittest.TestCase):
    def test_lengths_outside_bounds_fail_with_length_error(self) -> None:
        for length in (0, 1, 7, 13, 20):
            with self.subTest(length=length):
                with self.assertRaises(LengthError):
                    validate("x" * length)

    def test_boundary_lengths_are_accepted(self) -> None:
        self.assertEqual(validate("abcdefgh"), "abcdefgh")
        self.assertEqual(validate("abcdefghijkl"), "abcdefghijkl")

    def test_space_fails_with_whitespace_error(self) -> None:
        for candidate in ("has a space", " abcdefgh", "abcdefgh ", "ab  cdefg"):
            with self.subTest(candidate=candidate):
                with self.assertRaises(WhitespaceError):
                    validate(candidate)

    def test_length_is_checked_before_whitespace(self) -> None:
        with self.assertRaises(LengthError):
            validate("a b")
        with self.assertRaises(LengthError):
            validate("a b c d e f g h")

    def test_other_characters_are_accepted(self) -> None:
        for candidate in ("12345678", "!!!!@@@@", "tab\there1", "ÄÖÜßäöüé"):
            with self.subTest(candidate=candidate):
                self.assertEqual(validate(candidate), candidate)

    def test_errors_carry_kind_and_message(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate("short")
        self.assertEqual(ctx.exception.kind, "length")
        self.assertEqual(str(ctx.exception), "Password must be between 8 and 12 characters.")

        with self.assertRaises(ValidationError) as ctx:
            validate("has a space")
        self.assertEqual(ctx.exception.kind, "whitespace")
        self.assertEqual(ctx.exception.position, 3)
        self.assertEqual(str(ctx.exception), "Password cannot contain spaces.")

    def test_validation_errors_are_value_errors(self) -> None:
        self.assertTrue(issubclass(LengthError, ValueError))
        self.assertTrue(issubclass(WhitespaceError, ValueError))


class LongestRunTests(unittest.TestCase):
    def test_known_runs(self) -> None:
        cases = {
            "aabbbcde": 3,
            "abcdefgh": 1,
            "aaaaaaaaaaaa": 12,
            "abccccccdd": 6,
            "abcdefgg": 2,
            "aabbccdd": 2,
            "a": 1,
        }
        for candidate, expected in cases.items():
            with self.subTest(candidate=candidate):
                self.assertEqual(longest_run(candidate), expected)

    def test_run_is_within_bounds_and_full_only_when_uniform(self) -> None:
        samples = ["abcdefgh", "aabbbcde", "zzzzzzzz", "zzzzzzzy", "12121212", "xxxxyyyyzzzz"]
        for candidate in samples:
            with self.subTest(candidate=candidate):
                run = longest_run(candidate)
                self.assertGreaterEqual(run, 1)
                self.assertLessEqual(run, len(candidate))
                self.assertEqual(run == len(candidate), len(set(candidate)) == 1)

    def test_empty_input_has_no_block(self) -> None:
        self.assertEqual(longest_run(""), 0)
        self.assertIsNone(find_longest_block(""))

    def test_block_reports_earliest_longest_run(self) -> None:
        block = find_longest_block("aabbbcccd")
        assert block is not None
        self.assertEqual(block.char, "b")
        self.assertEqual(block.start, 2)
        self.assertEqual(block.length, 3)
        self.assertEqual(block.end, 5)

    def test_case_sensitive_comparison(self) -> None:
        self.assertEqual(longest_run("aAaAaAaA"), 1)


class ClassifyTests(unittest.TestCase):
    def test_runs_above_two_ask_for_reduction(self) -> None:
        feedback = classify(3)
        self.assertEqual(feedback.reduce_by, 1)
        self.assertFalse(feedback.is_decent)
        self.assertIn("reduce the block by 1 characters.", feedback.message)

        self.assertIn("reduce the block by 10 characters.", classify(12).message)

    def test_runs_up_to_two_are_decent(self) -> None:
        for run_length in (1, 2):
            with self.subTest(run_length=run_length):
                feedback = classify(run_length)
                self.assertTrue(feedback.is_decent)
                self.assertEqual(feedback.reduce_by, 0)
                self.assertIn("decent password.", feedback.message)


class AnalyzeTests(unittest.TestCase):
    def test_block_of_three(self) -> None:
        result = analyze("aabbbcde")
        self.assertIsInstance(result, AnalysisSuccess)
        assert isinstance(result, AnalysisSuccess)
        self.assertEqual(result.run_length, 3)
        self.assertEqual(result.block.char, "b")
        self.assertIn("reduce the block by 1 characters.", result.feedback.message)

    def test_no_repeats_is_decent(self) -> None:
        result = analyze("abcdefgh")
        self.assertTrue(result.ok)
        self.assertEqual(result.to_dict(), {"run_length": 1, "feedback": "This is a decent password."})

    def test_short_password_is_a_length_failure(self) -> None:
        result = analyze("short")
        self.assertIsInstance(result, AnalysisFailure)
        assert isinstance(result, AnalysisFailure)
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, "length")
        self.assertEqual(result.to_dict(), {"error": "Password must be between 8 and 12 characters."})

    def test_space_is_a_whitespace_failure(self) -> None:
        result = analyze("has a space")
        assert isinstance(result, AnalysisFailure)
        self.assertEqual(result.kind, "whitespace")
        self.assertEqual(result.error, "Password cannot contain spaces.")

    def test_uniform_password_reports_full_length(self) -> None:
        result = analyze("aaaaaaaaaaaa")
        assert isinstance(result, AnalysisSuccess)
        self.assertEqual(result.run_length, 12)
        self.assertEqual(result.feedback.reduce_by, 10)
        self.assertEqual(result.feedback.message, "Please reduce the block by 10 characters.")

    def test_analyze_is_idempotent(self) -> None:
        for candidate in ("aabbbcde", "short", "has a space", "abcdefgh"):
            with self.subTest(candidate=candidate):
                self.assertEqual(analyze(candidate), analyze(candidate))

    def test_empty_candidate_past_validation_is_rejected_by_scan(self) -> None:
        analyzer = PasswordAnalyzer()
        with mock.patch.object(PasswordAnalyzer, "validate", return_value=""):
            with self.assertRaises(ValueError) as ctx:
                analyzer.analyze("")
        self.assertNotIsInstance(ctx.exception, ValidationError)

    def test_use_case_delegates_to_analyzer(self) -> None:
        use_case = AnalyzePassword(PasswordAnalyzer())
        self.assertEqual(use_case.execute(password="aabbbcde"), analyze("aabbbcde"))


class PolicyTests(unittest.TestCase):
    def test_default_policy_values(self) -> None:
        self.assertEqual(DEFAULT_POLICY.min_length, 8)
        self.assertEqual(DEFAULT_POLICY.max_length, 12)
        self.assertEqual(DEFAULT_POLICY.block_threshold, 2)
        self.assertEqual(DEFAULT_POLICY.forbidden, " ")

    def test_invalid_policies_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PasswordPolicy(min_length=0)
        with self.assertRaises(ValueError):
            PasswordPolicy(min_length=10, max_length=9)
        with self.assertRaises(ValueError):
            PasswordPolicy(block_threshold=0)

    def test_custom_policy_changes_bounds_and_threshold(self) -> None:
        analyzer = PasswordAnalyzer(PasswordPolicy(min_length=4, max_length=6, block_threshold=3))

        failure = analyzer.analyze("abc")
        assert isinstance(failure, AnalysisFailure)
        self.assertEqual(failure.error, "Password must be between 4 and 6 characters.")

        success = analyzer.analyze("aaab")
        assert isinstance(success, AnalysisSuccess)
        self.assertEqual(success.run_length, 3)
        self.assertTrue(success.feedback.is_decent)


if __name__ == "__main__":
    unittest.main()
