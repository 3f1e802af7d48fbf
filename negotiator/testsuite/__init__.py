"""
    negotiator.testsuite
    ~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2015 Ben Mather, based on Werkzeug, see AUTHORS for more details.
    :license:
        BSD, see LICENSE for more details.

"""
import unittest

from negotiator.testsuite import (
    test_accept_base, test_accept_charset, test_negotiator,
)


loader = unittest.TestLoader()
suite = unittest.TestSuite((
    loader.loadTestsFromModule(test_accept_base),
    loader.loadTestsFromModule(test_accept_charset),
    loader.loadTestsFromModule(test_negotiator),
))
