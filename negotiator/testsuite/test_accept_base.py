"""
    negotiator.testsuite.test_accept_base
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Tests for the shared accept header parsing and ranking code.


    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import unittest

from negotiator.accept._base import (
    split_accept_string, parse_quality, Acceptability,
)


class SplitAcceptStringTestCase(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(
            [('utf-8', 1.0, 0)],
            list(split_accept_string('utf-8')),
        )

    def test_multiple(self):
        self.assertEqual(
            [('utf-8', 1.0, 0), ('ascii', 0.5, 1), ('*', 0.1, 2)],
            list(split_accept_string('utf-8, ascii;q=0.5, *;q=0.1')),
        )

    def test_preserves_case(self):
        value, _, _ = next(split_accept_string('ISO-8859-1'))
        self.assertEqual('ISO-8859-1', value)

    def test_whitespace(self):
        self.assertEqual(
            [('utf-8', 0.5, 0)],
            list(split_accept_string('  utf-8 ; q=0.5  ')),
        )

    def test_empty_segments_keep_position(self):
        self.assertEqual(
            [('utf-8', 1.0, 0), ('latin-1', 1.0, 3)],
            list(split_accept_string('utf-8, ,, latin-1')),
        )

    def test_malformed_segment_dropped(self):
        self.assertEqual(
            [('utf-8', 1.0, 1)],
            list(split_accept_string('latin 1, utf-8')),
        )

    def test_malformed_segment_logged(self):
        with self.assertLogs('negotiator.accept._base', level='DEBUG') as cm:
            list(split_accept_string('latin 1, utf-8'))
        self.assertIn('latin 1', cm.output[0])

    def test_empty_string(self):
        self.assertEqual([], list(split_accept_string('')))

    def test_trailing_semicolon(self):
        self.assertEqual(
            [('*', 1.0, 0), ('UTF-8', 1.0, 1)],
            list(split_accept_string('*, UTF-8;')),
        )

    def test_unrelated_params_ignored(self):
        self.assertEqual(
            [('UTF-8', 0.3, 0)],
            list(split_accept_string('UTF-8;foo=bar;q=0.3;level')),
        )

    def test_spaces_around_equals(self):
        self.assertEqual(
            [('utf-8', 0.5, 0)],
            list(split_accept_string('utf-8; q = 0.5')),
        )

    def test_last_q_wins(self):
        self.assertEqual(
            [('utf-8', 0.2, 0)],
            list(split_accept_string('utf-8;q=0.5;q=0.2')),
        )

    def test_invalid_q_defaults_to_one(self):
        self.assertEqual(
            [('utf-8', 1.0, 0)],
            list(split_accept_string('utf-8;q=high')),
        )

    def test_malformed_param_ignored(self):
        self.assertEqual(
            [('utf-8', 1.0, 0)],
            list(split_accept_string('utf-8;q=0.5=0.2')),
        )


class ParseQualityTestCase(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(0.5, parse_quality('0.5'))
        self.assertEqual(0.0, parse_quality('0'))
        self.assertEqual(1.0, parse_quality('1.000'))

    def test_invalid(self):
        self.assertEqual(1.0, parse_quality(''))
        self.assertEqual(1.0, parse_quality('one'))
        self.assertEqual(1.0, parse_quality('nan'))
        self.assertEqual(1.0, parse_quality(None))

    def test_custom_default(self):
        self.assertEqual(0.25, parse_quality('bad', default=0.25))

    def test_clamped(self):
        self.assertEqual(1.0, parse_quality('2'))
        self.assertEqual(0.0, parse_quality('-0.5'))
        self.assertEqual(1.0, parse_quality('inf'))


class AcceptabilityTestCase(unittest.TestCase):
    def _acceptability(self, q=1.0, exact_match=True, position=0, index=0):
        return Acceptability(
            'value', exact_match=exact_match, q=q,
            position=position, index=index,
        )

    def test_quality_first(self):
        self.assertGreater(
            self._acceptability(q=0.9, exact_match=False, position=5),
            self._acceptability(q=0.8, exact_match=True, position=0),
        )

    def test_specificity_second(self):
        self.assertGreater(
            self._acceptability(exact_match=True, position=3),
            self._acceptability(exact_match=False, position=0),
        )

    def test_position_third(self):
        self.assertGreater(
            self._acceptability(position=0, index=4),
            self._acceptability(position=1, index=0),
        )

    def test_index_last(self):
        self.assertGreater(
            self._acceptability(index=0),
            self._acceptability(index=1),
        )

    def test_missing_index(self):
        self.assertEqual(
            self._acceptability(index=None),
            self._acceptability(index=0),
        )

    def test_equal(self):
        self.assertEqual(self._acceptability(), self._acceptability())
        self.assertNotEqual(self._acceptability(), None)

    def test_greater_than_none(self):
        self.assertGreater(self._acceptability(q=0), None)

    def test_overrides_prefers_exact_match(self):
        exact = self._acceptability(q=0, exact_match=True, position=1)
        wildcard = self._acceptability(q=1, exact_match=False, position=0)

        self.assertTrue(exact.overrides(wildcard))
        self.assertFalse(wildcard.overrides(exact))

    def test_overrides_quality(self):
        high = self._acceptability(q=0.9, position=2)
        low = self._acceptability(q=0.7, position=0)

        self.assertTrue(high.overrides(low))
        self.assertFalse(low.overrides(high))

    def test_overrides_position(self):
        first = self._acceptability(position=0)
        second = self._acceptability(position=2)

        self.assertTrue(first.overrides(second))
        self.assertFalse(second.overrides(first))

    def test_specificity(self):
        self.assertEqual(1, self._acceptability(exact_match=True).specificity)
        self.assertEqual(0, self._acceptability(exact_match=False).specificity)
