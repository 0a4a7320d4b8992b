"""
Helpers that assemble redfiles in memory for the tests.
"""

import struct

from thrift.protocol import TCompactProtocol
from thrift.transport.TTransport import TMemoryBuffer
from redfile.ttypes import (
    ColumnChunk,
    ColumnMetaData,
    CompressionCodec,
    DataPageHeader,
    DictionaryPageHeader,
    Encoding,
    FieldRepetitionType,
    FileMetaData,
    PageHeader,
    PageType,
    RowGroup,
    SchemaElement,
    Type,
)

MAGIC = b"RED1"

PLAIN_FORMATS = {
    Type.INT32: "<i",
    Type.INT64: "<q",
    Type.FLOAT: "<f",
    Type.DOUBLE: "<d",
}


def serialize(msg):
    transport = TMemoryBuffer()
    msg.write(TCompactProtocol.TCompactProtocol(transport))
    return transport.getvalue()


def presence_bitmap(values):
    bitmap = bytearray((len(values) + 7) // 8)
    for n, value in enumerate(values):
        if value is not None:
            bitmap[n // 8] |= 1 << (n % 8)
    return bytes(bitmap)


def plain_values(value_type, values):
    if value_type == Type.BOOLEAN:
        packed = bytearray((len(values) + 7) // 8)
        for n, value in enumerate(values):
            if value:
                packed[n // 8] |= 1 << (n % 8)
        return bytes(packed)
    if value_type == Type.BYTE_ARRAY:
        return b"".join(struct.pack("<I", len(v)) + v for v in values)
    fmt = PLAIN_FORMATS[value_type]
    return b"".join(struct.pack(fmt, v) for v in values)


def data_page_body(value_type, values):
    """Bitmap plus PLAIN values; None entries are nulls."""
    present = [v for v in values if v is not None]
    return presence_bitmap(values) + plain_values(value_type, present)


def page(body, num_values=0, page_type=PageType.DATA_PAGE, encoding=Encoding.PLAIN,
         compressed_page_size=None):
    header = PageHeader(
        type=page_type,
        uncompressed_page_size=len(body),
        compressed_page_size=len(body) if compressed_page_size is None else compressed_page_size,
    )
    if page_type == PageType.DATA_PAGE:
        header.data_page_header = DataPageHeader(
            num_values=num_values,
            encoding=encoding,
            definition_level_encoding=Encoding.BIT_PACKED,
            repetition_level_encoding=Encoding.BIT_PACKED,
        )
    elif page_type == PageType.DICTIONARY_PAGE:
        header.dictionary_page_header = DictionaryPageHeader(
            num_values=num_values, encoding=encoding
        )
    return serialize(header) + body


def data_page(value_type, values, encoding=Encoding.PLAIN):
    return page(data_page_body(value_type, values), len(values), encoding=encoding)


class RedfileBuilder:
    """
    Lays out row groups back to back after the header magic, then the
    FileMetaData, the footer pointer and the trailing magic.
    """

    def __init__(self, column_names=None):
        self.column_names = column_names
        self._data = bytearray(MAGIC)
        self.row_groups = []

    def add_row_group(self, columns, num_rows=0):
        """`columns` is a list of (type, [page bytes, ...]) pairs."""
        chunks = []
        for c, (value_type, pages) in enumerate(columns):
            start = len(self._data)
            for page_bytes in pages:
                self._data += page_bytes
            size = len(self._data) - start
            chunks.append(
                ColumnChunk(
                    file_offset=len(self._data),
                    meta_data=ColumnMetaData(
                        type=value_type,
                        encodings=[Encoding.PLAIN],
                        path_in_schema=[self._column_name(c)],
                        codec=CompressionCodec.UNCOMPRESSED,
                        num_values=num_rows,
                        total_uncompressed_size=size,
                        total_compressed_size=size,
                        data_page_offset=start,
                    ),
                )
            )
        self.row_groups.append(
            RowGroup(
                columns=chunks,
                total_byte_size=sum(c.meta_data.total_compressed_size for c in chunks),
                num_rows=num_rows,
            )
        )
        return chunks

    def _column_name(self, index):
        if self.column_names:
            return self.column_names[index]
        return f"col{index}"

    def file_metadata(self):
        columns = self.row_groups[0].columns if self.row_groups else []
        schema = [SchemaElement(name="schema", num_children=len(columns))]
        for c, column in enumerate(columns):
            schema.append(
                SchemaElement(
                    type=column.meta_data.type if column.meta_data else None,
                    repetition_type=FieldRepetitionType.OPTIONAL,
                    name=self._column_name(c),
                )
            )
        return FileMetaData(
            version=1,
            schema=schema,
            num_rows=sum(rg.num_rows for rg in self.row_groups),
            row_groups=self.row_groups,
            created_by="redfile-reader tests",
        )

    def build(self, metadata=None):
        if metadata is None:
            metadata = serialize(self.file_metadata())
        footer = struct.pack("<I", len(metadata) + 8) + MAGIC
        return bytes(self._data) + metadata + footer
