#!/usr/bin/env python
import sys
import logging
from optparse import OptionParser

from django.conf import settings
from django.test.utils import get_runner

logging.disable(logging.CRITICAL)

# Configures the test settings
import tests  # noqa


def run_tests(*test_args):
    if not test_args:
        test_args = ['tests']

    # Run tests
    TestRunner = get_runner(settings)
    test_runner = TestRunner(verbosity=1)

    num_failures = test_runner.run_tests(test_args)

    if num_failures > 0:
        sys.exit(num_failures)


if __name__ == '__main__':
    parser = OptionParser()
    (options, args) = parser.parse_args()
    run_tests(*args)
