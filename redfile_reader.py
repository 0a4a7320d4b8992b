"""
Redfile Reader: validating reader for redfile columnar files

This tool reads a redfile from local disk, checks that it is correctly formed
and outputs the values stored in each data page. The entire file is buffered
in memory, so it is not suitable for very large files.

File layout:
    RED1
    <Data (Row Groups -> Column Chunks -> Pages)>
    <FileMetaData (Thrift, compact protocol)>
    <Footer pointer (4 bytes, uint32 LE): distance from end of file to FileMetaData>
    RED1

Each page is a compact-protocol PageHeader followed by `compressed_page_size`
bytes of body. PLAIN data page bodies hold a null-presence bitmap (bit set
means the value is present) followed by the packed non-null values.

Usage:
    python redfile_reader.py <redfile> [--values-per-data-page N]
        [--output-page-header] [--output-to-csv] [--log-level LEVEL]

Progress, metadata, values and the summary go to stderr through logging;
with --output-to-csv the rows go to stdout, one per line, separated by '|'.
"""

import argparse
import functools
import logging
import struct
import sys

from thrift.Thrift import TException
from thrift.protocol import TCompactProtocol
from thrift.transport.TTransport import TMemoryBuffer
from redfile.ttypes import Encoding, FileMetaData, PageHeader, PageType, Type

logger = logging.getLogger(__name__)

MAGIC = b"RED1"
FOOTER_POINTER = struct.Struct("<I")
FOOTER_SIZE = FOOTER_POINTER.size + len(MAGIC)
BYTE_ARRAY_LENGTH = struct.Struct("<I")
CSV_DELIMITER = "|"


class RedfileError(ValueError):
    """Base class for every failure raised while reading a redfile."""


class FormatViolationError(RedfileError):
    """The bytes do not form a valid redfile."""


class CorruptPageError(FormatViolationError):
    """A page body is too short for the values its header declares."""


class UnsupportedFeatureError(RedfileError):
    """The file is well formed but uses something this reader can't decode."""


class ByteView:
    """Bounds-checked, read-only window over the file buffer.

    Offsets given to a view are relative to its start; `start` and `end` are
    absolute positions in the file. Out-of-range access raises the view's
    `error_class`.
    """

    def __init__(self, data, start=0, end=None, error_class=FormatViolationError):
        if not isinstance(data, bytes):
            data = bytes(data)
        self._data = data
        self._mv = memoryview(data)
        self.start = start
        self.end = len(data) if end is None else end
        self.error_class = error_class

    def __len__(self):
        return self.end - self.start

    def __repr__(self):
        return f"ByteView([{self.start}, {self.end}))"

    def _check(self, offset, length, what):
        if offset < 0 or length < 0 or offset + length > len(self):
            raise self.error_class(
                f"{what} [{self.start + offset}, {self.start + offset + length}) "
                f"is outside [{self.start}, {self.end})"
            )

    def slice(self, offset, length, what="region", error_class=None):
        self._check(offset, length, what)
        return ByteView(
            self._data,
            self.start + offset,
            self.start + offset + length,
            error_class or self.error_class,
        )

    def byte_at(self, offset, what="byte"):
        self._check(offset, 1, what)
        return self._mv[self.start + offset]

    def unpack_from(self, st, offset, what="value"):
        self._check(offset, st.size, what)
        return st.unpack_from(self._mv, self.start + offset)

    def tobytes(self, offset=0, length=None, what="bytes"):
        if length is None:
            length = len(self) - offset
        self._check(offset, length, what)
        return self._mv[self.start + offset:self.start + offset + length].tobytes()

    def transport(self):
        """Returns a TMemoryBuffer over the whole file, positioned at `start`."""
        transport = TMemoryBuffer(self._data)
        transport._buffer.seek(self.start)
        return transport


def validate_all(msg):
    """Runs validate() on `msg` and every struct nested inside it."""
    for field in msg.thrift_spec:
        if field is None:
            continue
        value = getattr(msg, field[2])
        if isinstance(value, list):
            for item in value:
                if hasattr(item, "thrift_spec"):
                    validate_all(item)
        elif hasattr(value, "thrift_spec"):
            validate_all(value)
    msg.validate()


def decode_thrift_msg(view, struct_class):
    """
    Deserializes a compact-protocol Thrift message of type `struct_class`.

    `view` is an upper bound: the message must end inside it, but the view may
    run past the message. Returns the message and the number of bytes it
    actually occupied.
    """
    transport = view.transport()
    protocol = TCompactProtocol.TCompactProtocol(
        transport,
        string_length_limit=len(view),
        container_length_limit=len(view),
    )
    msg = struct_class()
    try:
        msg.read(protocol)
        validate_all(msg)
    except (TException, EOFError, KeyError, struct.error, UnicodeDecodeError) as e:
        raise FormatViolationError(
            f"Couldn't deserialize {struct_class.__name__} at offset {view.start}: {e}"
        ) from e
    size = transport._buffer.tell() - view.start
    if size > len(view):
        raise FormatViolationError(
            f"{struct_class.__name__} at offset {view.start} is {size} bytes long, "
            f"only {len(view)} bytes available"
        )
    return msg, size


def read_container(container):
    """
    Validates the magic numbers and decodes the FileMetaData.

    Returns (file_metadata, metadata_start, metadata_length), where
    metadata_length is the number of bytes the FileMetaData occupied.
    """
    file_len = len(container)
    if file_len < len(MAGIC) + FOOTER_SIZE:
        raise FormatViolationError(
            f"Not a valid redfile - {file_len} bytes is too short"
        )

    header = container.tobytes(0, len(MAGIC))
    if header != MAGIC:
        raise FormatViolationError(
            f"Not a valid redfile - expected {MAGIC!r} header at offset 0, got {header!r}"
        )
    footer_magic = container.tobytes(file_len - len(MAGIC), len(MAGIC))
    if footer_magic != MAGIC:
        raise FormatViolationError(
            f"Not a valid redfile - expected {MAGIC!r} footer at offset "
            f"{file_len - len(MAGIC)}, got {footer_magic!r}"
        )

    (metadata_offset,) = container.unpack_from(FOOTER_POINTER, file_len - FOOTER_SIZE)
    logger.info("Metadata offset: %d", metadata_offset)
    # The metadata block sits between the header magic and the footer pointer.
    if not FOOTER_SIZE < metadata_offset <= file_len - len(MAGIC):
        raise FormatViolationError(
            f"Metadata offset {metadata_offset} is out of range for a "
            f"{file_len} byte file"
        )

    metadata_start = file_len - metadata_offset
    metadata_len = metadata_offset - FOOTER_SIZE
    file_metadata, consumed = decode_thrift_msg(
        container.slice(metadata_start, metadata_len, "metadata"), FileMetaData
    )
    if consumed != metadata_len:
        logger.warning(
            "FileMetaData used %d of the %d metadata bytes", consumed, metadata_len
        )
    return file_metadata, metadata_start, consumed


class PlainValueReader:
    """Reads consecutive PLAIN values; `offset` is the next unread byte."""

    def __init__(self, values):
        self.values = values
        self.offset = 0


class BooleanReader(PlainValueReader):
    # Booleans are bit packed LSB first, one bit per non-null value.
    def __init__(self, values):
        super().__init__(values)
        self.index = 0

    def read(self):
        byte = self.values.byte_at(self.index // 8, "boolean value")
        value = (byte & (1 << (self.index % 8))) != 0
        self.index += 1
        self.offset = (self.index + 7) // 8
        return value


class FixedWidthReader(PlainValueReader):
    def __init__(self, values, fmt):
        super().__init__(values)
        self._struct = struct.Struct(fmt)

    def read(self):
        (value,) = self.values.unpack_from(self._struct, self.offset, "value")
        self.offset += self._struct.size
        return value


class ByteArrayReader(PlainValueReader):
    def read(self):
        (length,) = self.values.unpack_from(
            BYTE_ARRAY_LENGTH, self.offset, "byte array length"
        )
        value = self.values.tobytes(
            self.offset + BYTE_ARRAY_LENGTH.size, length, "byte array value"
        )
        self.offset += BYTE_ARRAY_LENGTH.size + length
        return value


# INT96 is a reserved type with no PLAIN reader.
VALUE_READERS = {
    Type.BOOLEAN: BooleanReader,
    Type.INT32: functools.partial(FixedWidthReader, fmt="<i"),
    Type.INT64: functools.partial(FixedWidthReader, fmt="<q"),
    Type.INT96: None,
    Type.FLOAT: functools.partial(FixedWidthReader, fmt="<f"),
    Type.DOUBLE: functools.partial(FixedWidthReader, fmt="<d"),
    Type.BYTE_ARRAY: ByteArrayReader,
}


def type_name(value_type):
    return Type._VALUES_TO_NAMES.get(value_type, str(value_type))


def make_value_reader(value_type, values):
    reader_class = VALUE_READERS.get(value_type)
    if reader_class is None:
        raise UnsupportedFeatureError(f"Unsupported column type: {type_name(value_type)}")
    return reader_class(values)


def decode_data_page(body, num_values, value_type, output_limit=-1):
    """
    Decodes the first `output_limit` values (all of them if negative) of a
    PLAIN data page body. Returns a list with None for each null value.
    """
    if num_values < 0:
        raise CorruptPageError(
            f"Data page at offset {body.start} declares {num_values} values"
        )
    bitmap_size = (num_values + 7) // 8
    bitmap = body.slice(0, bitmap_size, "null-presence bitmap", CorruptPageError)
    reader = make_value_reader(
        value_type,
        body.slice(bitmap_size, len(body) - bitmap_size, "page values", CorruptPageError),
    )

    num_output_values = num_values
    if output_limit >= 0:
        num_output_values = min(num_values, output_limit)

    values = []
    for n in range(num_output_values):
        if bitmap.byte_at(n // 8) & (1 << (n % 8)):
            values.append(reader.read())
        else:
            values.append(None)
    return values


def format_value(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.hex()
    return str(value)


class ReaderOptions:
    def __init__(self, values_per_data_page=-1, output_page_header=False, output_to_csv=False):
        if output_to_csv:
            # Rows are assembled from every value of every page.
            values_per_data_page = -1
        self.values_per_data_page = values_per_data_page
        self.output_page_header = output_page_header
        self.output_to_csv = output_to_csv


class ParseContext:
    """Counters and output rows collected while walking one file."""

    logger = logging.getLogger(__qualname__)

    def __init__(self, file_length, options=None):
        self.options = options or ReaderOptions()
        self.file_length = file_length
        self.file_metadata = None
        self.metadata_length = 0
        self.pages_read = 0
        self.pages_skipped = 0
        self.num_rows = 0
        self.total_page_header_size = 0
        self.total_column_data_size = 0
        self.column_sizes = []
        self.rows = [] if self.options.output_to_csv else None
        self._row_group_base = 0
        self._base_row_idx = 0

    def start_row_group(self, num_columns):
        if len(self.column_sizes) < num_columns:
            self.column_sizes.extend([0] * (num_columns - len(self.column_sizes)))
        if self.rows is not None:
            self._row_group_base = len(self.rows)

    def start_column(self, column_index):
        self._base_row_idx = self._row_group_base

    def add_page(self, column_index, header_size, page_size):
        self.total_page_header_size += header_size
        self.total_column_data_size += page_size
        self.column_sizes[column_index] += page_size

    def skip_page(self, column_index=None, num_values=0):
        """
        Counts a skipped page. A skipped data page still occupies
        `num_values` rows, left empty for its column.
        """
        self.pages_skipped += 1
        if self.rows is not None and column_index is not None and num_values > 0:
            self._add_row_fields(column_index, [None] * num_values)

    def add_values(self, column_index, num_values, values):
        self.pages_read += 1
        if column_index == 0:
            self.num_rows += num_values

        if self.rows is None:
            for value in values:
                self.logger.info("Value: %s", "NULL" if value is None else format_value(value))
        else:
            self._add_row_fields(column_index, values)

    def _add_row_fields(self, column_index, values):
        if column_index == 0:
            self.rows.extend([] for _ in values)
        end = self._base_row_idx + len(values)
        if end > len(self.rows):
            raise FormatViolationError(
                f"Column {column_index} has more values than column 0 "
                f"({end} > {len(self.rows)} rows)"
            )
        for n, value in enumerate(values):
            self.rows[self._base_row_idx + n].append(format_value(value))
        self._base_row_idx += len(values)

    def _ratio(self, size):
        return size / self.file_length if self.file_length else 0.0

    def summary(self):
        return {
            "rows": self.num_rows,
            "pages_read": self.pages_read,
            "pages_skipped": self.pages_skipped,
            "metadata_size": self.metadata_length,
            "metadata_ratio": self._ratio(self.metadata_length),
            "page_header_size": self.total_page_header_size,
            "page_header_ratio": self._ratio(self.total_page_header_size),
            "column_data_size": self.total_column_data_size,
            "column_data_ratio": self._ratio(self.total_column_data_size),
            "column_sizes": list(self.column_sizes),
        }

    def format_summary(self):
        def sized(size):
            return f"{size}({self._ratio(size):g})"

        lines = [
            "",
            "Summary:",
            f"  Rows: {self.num_rows}",
            f"  Read pages: {self.pages_read}",
            f"  Skipped pages: {self.pages_skipped}",
            f"  Metadata size: {sized(self.metadata_length)}",
            f"  Total page header size: {sized(self.total_page_header_size)}",
            f"  Column byte sizes: {sized(self.total_column_data_size)}",
        ]
        for i, size in enumerate(self.column_sizes):
            lines.append(f"    Col {i}: {sized(size)}")
        return "\n".join(lines)

    def csv_lines(self):
        for row in self.rows or ():
            yield CSV_DELIMITER.join(row)


def walk_column_chunk(data, column, row_group_index, column_index, context):
    """
    Walks every page of one column chunk. The pages must cover
    [data_page_offset, file_offset) exactly.
    """
    where = f"row group {row_group_index} column {column_index}"
    meta = column.meta_data
    if meta is None:
        raise FormatViolationError(f"Column chunk in {where} has no meta_data")
    chunk_start = meta.data_page_offset
    chunk_end = column.file_offset
    if chunk_start > chunk_end:
        raise FormatViolationError(
            f"Column chunk in {where} starts at {chunk_start} after its end {chunk_end}"
        )
    chunk = data.slice(chunk_start, chunk_end - chunk_start, f"column chunk in {where}")

    cursor = 0
    while cursor < len(chunk):
        header, header_size = decode_thrift_msg(
            chunk.slice(cursor, len(chunk) - cursor, "page header"), PageHeader
        )
        if context.options.output_page_header:
            logger.info("%r", header)
        logger.debug("Page header at %d (%d bytes) in %s", chunk.start + cursor, header_size, where)
        cursor += header_size

        page_size = header.compressed_page_size
        if page_size < 0 or cursor + page_size > len(chunk):
            raise FormatViolationError(
                f"Page at offset {chunk.start + cursor} in {where} declares "
                f"{page_size} bytes, {len(chunk) - cursor} left in column chunk"
            )
        context.add_page(column_index, header_size, page_size)

        if header.type != PageType.DATA_PAGE:
            logger.debug("Skipping %s page", PageType._VALUES_TO_NAMES.get(header.type, header.type))
            context.skip_page()
            cursor += page_size
            continue
        data_page = header.data_page_header
        if data_page is None:
            raise FormatViolationError(
                f"Data page at offset {chunk.start + cursor} in {where} has no data_page_header"
            )
        if data_page.encoding != Encoding.PLAIN:
            logger.debug(
                "Skipping %s encoded page",
                Encoding._VALUES_TO_NAMES.get(data_page.encoding, data_page.encoding),
            )
            context.skip_page(column_index, data_page.num_values)
            cursor += page_size
            continue

        body = chunk.slice(cursor, page_size, "page body", CorruptPageError)
        values = decode_data_page(
            body,
            data_page.num_values,
            meta.type,
            context.options.values_per_data_page,
        )
        context.add_values(column_index, data_page.num_values, values)
        cursor += page_size

    if cursor != len(chunk):
        raise FormatViolationError(
            f"Column chunk in {where} ended at {chunk.start + cursor}, expected {chunk.end}"
        )


def walk_row_groups(data, file_metadata, context):
    for i, row_group in enumerate(file_metadata.row_groups):
        logger.info("Reading row group %d", i)
        context.start_row_group(len(row_group.columns))
        for c, column in enumerate(row_group.columns):
            logger.info("  Reading column %d", c)
            context.start_column(c)
            walk_column_chunk(data, column, i, c, context)


def read_redfile(data, options=None):
    """Parses a whole in-memory redfile and returns the filled ParseContext."""
    container = ByteView(data)
    logger.info("File Length: %d", len(container))
    context = ParseContext(len(container), options)

    file_metadata, metadata_start, metadata_len = read_container(container)
    logger.info("%r", file_metadata)
    context.file_metadata = file_metadata
    context.metadata_length = metadata_len

    walk_row_groups(container.slice(0, metadata_start, "data"), file_metadata, context)
    logger.info("%s", context.format_summary())
    return context


def read_redfile_file(file_path, options=None):
    with open(file_path, "rb") as f:
        data = f.read()
    return read_redfile(data, options)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Redfile reader: validates a redfile and outputs its values."
    )
    parser.add_argument("redfile_file", help="Path to the redfile to read.")
    parser.add_argument(
        "--values-per-data-page",
        type=int,
        default=-1,
        help="Number of values to output per data page (-1 for all).",
    )
    parser.add_argument(
        "--output-page-header",
        action="store_true",
        help="Output page headers to stderr.",
    )
    parser.add_argument(
        "--output-to-csv",
        action="store_true",
        help="Output rows to stdout, '|' separated. This can be very slow.",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.getLevelNamesMapping()[args.log_level.upper()],
        format="%(asctime)s %(name)s [%(threadName)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    options = ReaderOptions(
        values_per_data_page=args.values_per_data_page,
        output_page_header=args.output_page_header,
        output_to_csv=args.output_to_csv,
    )
    try:
        context = read_redfile_file(args.redfile_file, options)
    except (RedfileError, OSError) as e:
        logger.error("%s", e)
        return 1

    for line in context.csv_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
