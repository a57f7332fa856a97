"""
Import the packages in a fresh interpreter, where no singleton exists yet.

Run with: python -m pytest tests/series_builder/test_package_import.py -v
"""

import os
import subprocess
import sys
import unittest

SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))


def run_in_fresh_interpreter(code: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env['PYTHONPATH'] = SRC_DIR + os.pathsep + env.get('PYTHONPATH', '')
    return subprocess.run(
        [sys.executable, '-c', code],
        env=env,
        capture_output=True,
        text=True,
        timeout=30
    )


class TestPackageImport(unittest.TestCase):

    def assertImports(self, code):
        try:
            result = run_in_fresh_interpreter(code + "\nprint('import ok')")
        except subprocess.TimeoutExpired:
            self.fail(f"Import did not finish: {code}")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn('import ok', result.stdout)

    def test_import_series_builder(self):
        self.assertImports("import series_builder")

    def test_import_series_utils(self):
        self.assertImports("import series_utils")

    def test_import_widget_and_build(self):
        self.assertImports(
            "from series_builder import ActiveHighstockWidget, ListDataProvider\n"
            "options = {'series': [{'time': 't', 'data': 'v', 'timeType': 'plain'}]}\n"
            "widget = ActiveHighstockWidget(options, ListDataProvider([{'t': 1, 'v': 2}]))\n"
            "assert widget.prepare_options()['series'][0]['data'] == [[1, 2]]"
        )


if __name__ == '__main__':
    unittest.main()
