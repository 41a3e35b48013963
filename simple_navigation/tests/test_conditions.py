"""
Tests for the if/unless condition evaluator.

Covers:
- Absent, truthy and falsy conditions
- Lists of conditions
- Stripping of the reserved keys regardless of outcome
- Non-callable values
"""

from unittest.mock import MagicMock

from django.test import SimpleTestCase

from simple_navigation.conditions import should_add_item
from simple_navigation.exceptions import InvalidConditionError


class ShouldAddItemTests(SimpleTestCase):

    def test_no_conditions(self):
        options = {"option": True}
        self.assertTrue(should_add_item(options))
        self.assertEqual(options, {"option": True})

    def test_none_options(self):
        self.assertTrue(should_add_item(None))

    def test_if_truthy(self):
        self.assertTrue(should_add_item({"if": lambda: "yes"}))

    def test_if_falsy(self):
        self.assertFalse(should_add_item({"if": lambda: None}))

    def test_unless_truthy(self):
        self.assertFalse(should_add_item({"unless": lambda: True}))

    def test_unless_falsy(self):
        self.assertTrue(should_add_item({"unless": lambda: 0}))

    def test_both_must_permit_inclusion(self):
        self.assertTrue(should_add_item({"if": lambda: True, "unless": lambda: False}))
        self.assertFalse(should_add_item({"if": lambda: True, "unless": lambda: True}))
        self.assertFalse(should_add_item({"if": lambda: False, "unless": lambda: False}))

    def test_list_of_if_conditions(self):
        self.assertTrue(should_add_item({"if": [lambda: True, lambda: 1]}))
        self.assertFalse(should_add_item({"if": [lambda: True, lambda: False]}))

    def test_list_of_unless_conditions(self):
        self.assertFalse(should_add_item({"unless": [lambda: False, lambda: True]}))
        self.assertTrue(should_add_item({"unless": (lambda: False, None)}))

    def test_keys_stripped_when_included(self):
        options = {"if": lambda: True, "unless": lambda: False, "x": 1}
        should_add_item(options)
        self.assertEqual(options, {"x": 1})

    def test_keys_stripped_when_excluded(self):
        options = {"if": lambda: False, "unless": lambda: True}
        should_add_item(options)
        self.assertEqual(options, {})

    def test_predicates_called_without_arguments(self):
        predicate = MagicMock(return_value=True)
        should_add_item({"if": predicate})
        predicate.assert_called_once_with()

    def test_non_callable_if_raises(self):
        with self.assertRaises(InvalidConditionError):
            should_add_item({"if": "text"})

    def test_non_callable_unless_raises(self):
        with self.assertRaises(InvalidConditionError):
            should_add_item({"unless": True})

    def test_non_callable_checked_before_any_predicate_runs(self):
        predicate = MagicMock(return_value=False)
        options = {"if": [predicate, "text"]}
        with self.assertRaises(InvalidConditionError):
            should_add_item(options)
        predicate.assert_not_called()
        self.assertNotIn("if", options)
