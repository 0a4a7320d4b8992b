#!/usr/bin/env python3
"""
Main test runner for redfile-reader

This script runs all the tests for redfile-reader and reports the coverage.
"""

import os
import sys
import unittest
import coverage

# Add the parent directory and this directory to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def create_test_suite():
    """Create a suite from every tests/test_*.py module"""
    return unittest.defaultTestLoader.discover(
        os.path.dirname(os.path.abspath(__file__)), pattern="test_*.py"
    )


if __name__ == "__main__":
    # Start coverage before the reader is imported by the test modules
    cov = coverage.Coverage(source=["redfile_reader"])
    cov.start()

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(create_test_suite())

    cov.stop()
    cov.save()
    print("\nCoverage Report:")
    cov.report()

    if "--html" in sys.argv:
        cov.html_report(directory="htmlcov")
        print("\nHTML report generated in 'htmlcov' directory")

    sys.exit(0 if result.wasSuccessful() else 1)
