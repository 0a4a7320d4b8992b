#!/usr/bin/env python3
"""
Command line tests for redfile-reader.
"""

import io
import os
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

# Add the project root and this directory to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import redfile_reader

from redfile.ttypes import Type
from redfile_builder import RedfileBuilder, data_page


class TestMain(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        builder = RedfileBuilder(column_names=["flag", "score"])
        builder.add_row_group(
            [
                (Type.BOOLEAN, [data_page(Type.BOOLEAN, [True, None, False])]),
                (Type.DOUBLE, [data_page(Type.DOUBLE, [0.5, 2.25, None])]),
            ],
            num_rows=3,
        )
        self.data = builder.build()
        self.path = self._write("test.red", self.data)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, name, data):
        path = os.path.join(self.temp_dir, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_csv_output(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            status = redfile_reader.main([self.path, "--output-to-csv"])
        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue().splitlines(), ["true|0.5", "|2.25", "false|"])

    def test_diagnostic_output_only_on_stderr(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertLogs("ParseContext", level="INFO") as cm:
            status = redfile_reader.main([self.path, "--values-per-data-page", "2"])
        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "")
        self.assertEqual(len(cm.output), 4)

    def test_summary_logged(self):
        with self.assertLogs("redfile_reader", level="INFO") as cm:
            redfile_reader.main([self.path])
        output = "\n".join(cm.output)
        self.assertIn(f"File Length: {len(self.data)}", output)
        self.assertIn("Reading row group 0", output)
        self.assertIn("Rows: 3", output)
        self.assertIn("Read pages: 2", output)

    def test_corrupt_file_exit_status(self):
        data = bytearray(self.data)
        data[-3] ^= 0x20
        path = self._write("corrupt.red", bytes(data))
        with self.assertLogs("redfile_reader", level="ERROR") as cm:
            status = redfile_reader.main([path])
        self.assertEqual(status, 1)
        self.assertIn("footer", cm.output[0])

    def test_missing_file_exit_status(self):
        with self.assertLogs("redfile_reader", level="ERROR"):
            status = redfile_reader.main([os.path.join(self.temp_dir, "missing.red")])
        self.assertEqual(status, 1)

    def test_read_redfile_file(self):
        context = redfile_reader.read_redfile_file(
            self.path, redfile_reader.ReaderOptions(output_to_csv=True)
        )
        self.assertEqual(context.file_length, len(self.data))
        self.assertEqual(
            [schema.name for schema in context.file_metadata.schema],
            ["schema", "flag", "score"],
        )


if __name__ == "__main__":
    unittest.main()
