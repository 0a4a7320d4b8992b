#!/usr/bin/env python3
"""
Tests for locating and validating the redfile footer and FileMetaData.
"""

import os
import struct
import sys
import unittest
from unittest.mock import patch

# Add the project root and this directory to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
import redfile_reader
from redfile_reader import ByteView, FormatViolationError, RedfileError, read_container

from redfile.ttypes import Type
from redfile_builder import RedfileBuilder, data_page, serialize


def build_simple_file():
    builder = RedfileBuilder()
    builder.add_row_group(
        [(Type.INT32, [data_page(Type.INT32, [1, 2, 3])])], num_rows=3
    )
    return builder.build()


class TestReadContainer(unittest.TestCase):

    def test_valid_file(self):
        data = build_simple_file()
        file_metadata, metadata_start, metadata_len = read_container(ByteView(data))

        metadata_offset = struct.unpack("<I", data[-8:-4])[0]
        self.assertEqual(metadata_start, len(data) - metadata_offset)
        self.assertEqual(metadata_len, metadata_offset - 8)
        self.assertEqual(file_metadata.version, 1)
        self.assertEqual(file_metadata.num_rows, 3)
        self.assertEqual(len(file_metadata.row_groups), 1)
        self.assertEqual(file_metadata.row_groups[0].columns[0].meta_data.type, Type.INT32)

    def test_footer_pointer_range(self):
        data = build_simple_file()
        metadata_offset = struct.unpack("<I", data[-8:-4])[0]
        self.assertLessEqual(8 + 4, metadata_offset)
        self.assertLessEqual(metadata_offset, len(data))

    def test_bad_header_magic(self):
        data = b"RED2" + build_simple_file()[4:]
        with self.assertRaises(FormatViolationError) as cm:
            read_container(ByteView(data))
        self.assertIn("header at offset 0", str(cm.exception))

    def test_bad_footer_magic(self):
        data = bytearray(build_simple_file())
        data[-1] ^= 0xFF
        with self.assertRaises(FormatViolationError) as cm:
            read_container(ByteView(data))
        self.assertIn(f"footer at offset {len(data) - 4}", str(cm.exception))

    def test_bad_footer_magic_stops_parsing(self):
        data = bytearray(build_simple_file())
        data[-2] ^= 0x01
        with patch.object(redfile_reader, "walk_row_groups") as walk, \
                patch.object(redfile_reader, "decode_thrift_msg") as decode:
            with self.assertRaises(FormatViolationError):
                redfile_reader.read_redfile(bytes(data))
        walk.assert_not_called()
        decode.assert_not_called()

    def test_too_short(self):
        with self.assertRaises(FormatViolationError):
            read_container(ByteView(b"RED1RED1"))

    def test_metadata_offset_too_large(self):
        data = bytearray(build_simple_file())
        data[-8:-4] = struct.pack("<I", len(data))
        with self.assertRaises(FormatViolationError) as cm:
            read_container(ByteView(data))
        self.assertIn("out of range", str(cm.exception))

    def test_metadata_offset_too_small(self):
        data = bytearray(build_simple_file())
        data[-8:-4] = struct.pack("<I", 8)
        with self.assertRaises(FormatViolationError):
            read_container(ByteView(data))

    def test_metadata_missing_required_fields(self):
        builder = RedfileBuilder()
        data = builder.build(metadata=b"\x00")
        with self.assertRaises(FormatViolationError) as cm:
            read_container(ByteView(data))
        self.assertIn("FileMetaData", str(cm.exception))

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(FormatViolationError, RedfileError))
        self.assertTrue(issubclass(RedfileError, ValueError))

    def test_trailing_metadata_bytes_warn(self):
        builder = RedfileBuilder()
        builder.add_row_group([(Type.INT32, [data_page(Type.INT32, [7])])], num_rows=1)
        metadata = serialize(builder.file_metadata()) + b"\x00\x00"
        data = builder.build(metadata=metadata)
        with self.assertLogs("redfile_reader", level="WARNING") as cm:
            _, _, metadata_len = read_container(ByteView(data))
        self.assertEqual(metadata_len, len(metadata) - 2)
        self.assertTrue(any("metadata bytes" in line for line in cm.output))


class TestByteView(unittest.TestCase):

    def test_slice_is_absolute(self):
        view = ByteView(b"0123456789")
        sub = view.slice(2, 5)
        self.assertEqual((sub.start, sub.end), (2, 7))
        self.assertEqual(sub.tobytes(), b"23456")
        self.assertEqual(sub.slice(1, 2).tobytes(), b"34")

    def test_out_of_bounds(self):
        view = ByteView(b"0123456789").slice(2, 5)
        with self.assertRaises(FormatViolationError):
            view.slice(3, 3)
        with self.assertRaises(FormatViolationError):
            view.byte_at(5)
        with self.assertRaises(FormatViolationError):
            view.unpack_from(struct.Struct("<I"), 2)

    def test_error_class_is_inherited(self):
        view = ByteView(b"abc", error_class=redfile_reader.CorruptPageError)
        with self.assertRaises(redfile_reader.CorruptPageError):
            view.slice(0, 2).byte_at(2)


if __name__ == "__main__":
    unittest.main()
