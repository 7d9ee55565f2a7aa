"""
docfmt.io – Filesystem-facing pieces: include-tree walking, readers and output.
"""
from .output import FileOutputWriter
from .readers import (
    DataReader,
    DataReaderRegistry,
    JsonDataReader,
    TomlDataReader,
    read_data_file,
    read_template_text,
)
from .walker import TreeCollector

__all__ = [
    "FileOutputWriter",
    "DataReader",
    "DataReaderRegistry",
    "JsonDataReader",
    "TomlDataReader",
    "read_data_file",
    "read_template_text",
    "TreeCollector",
]
