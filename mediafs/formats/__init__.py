"""Destination format catalog and resolution."""

from mediafs.formats.catalog import (
    UNKNOWN_FORMAT,
    CodecId,
    ContainerType,
    FormatCatalog,
    FormatSpec,
    MediaKind,
    format_catalog,
    lookup_format,
)
from mediafs.formats.resolver import FormatResolver, format_resolver, resolve_format, split_type_list

__all__ = [
    "UNKNOWN_FORMAT",
    "CodecId",
    "ContainerType",
    "FormatCatalog",
    "FormatResolver",
    "FormatSpec",
    "MediaKind",
    "format_catalog",
    "format_resolver",
    "lookup_format",
    "resolve_format",
    "split_type_list",
]
