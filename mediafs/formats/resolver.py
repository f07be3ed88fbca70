"""Selection of the destination format from a configured type list.

The configuration carries an ordered, comma-separated list such as
``"webm,mp4,mp3"``. Earlier tokens win; tokens the catalog does not know are
skipped. A list with no known token resolves to ``UNKNOWN_FORMAT``, which is
not an error: callers decide whether that is fatal.
"""

from typing import List, Optional, Set

import structlog

from mediafs.core.errors import UnsupportedFormatError
from mediafs.formats.catalog import UNKNOWN_FORMAT, ContainerType, FormatCatalog, FormatSpec, format_catalog

logger = structlog.get_logger(__name__)

TYPE_LIST_SEPARATOR = ","


def split_type_list(type_list_csv: str) -> List[str]:
    """
    Split a destination-type list into its tokens, preserving order.

    Empty tokens are kept; they simply miss the catalog.

    Args:
        type_list_csv: Comma-separated destination-type list

    Returns:
        List of tokens in configured order
    """
    if not type_list_csv:
        return [""]
    return type_list_csv.split(TYPE_LIST_SEPARATOR)


class FormatResolver:
    """Resolves a destination-type list against a FormatCatalog."""

    def __init__(self, catalog: Optional[FormatCatalog] = None):
        self.catalog = catalog or format_catalog

    def resolve(self, type_list_csv: str) -> FormatSpec:
        """
        Pick the first token of the list that the catalog knows.

        Args:
            type_list_csv: Comma-separated destination-type list

        Returns:
            FormatSpec of the first known token, UNKNOWN_FORMAT if none is known
        """
        tokens = split_type_list(type_list_csv)
        spec = next(
            (s for s in map(self.catalog.lookup, tokens) if s.is_valid),
            UNKNOWN_FORMAT,
        )

        if spec.is_valid:
            logger.debug(
                "format_resolved",
                type_list=type_list_csv,
                container_type=spec.container_type.value,
                audio_codec=spec.audio_codec.value,
                video_codec=spec.video_codec.value,
            )
        else:
            logger.debug("format_unresolved", type_list=type_list_csv)

        return spec

    def candidates(self, type_list_csv: str) -> List[FormatSpec]:
        """
        Return every known format of the list in configured order.

        Repeated container types keep their first position only.

        Args:
            type_list_csv: Comma-separated destination-type list

        Returns:
            List of valid FormatSpecs, possibly empty
        """
        seen: Set[ContainerType] = set()
        result: List[FormatSpec] = []
        for spec in map(self.catalog.lookup, split_type_list(type_list_csv)):
            if spec.is_valid and spec.container_type not in seen:
                seen.add(spec.container_type)
                result.append(spec)
        return result

    def require(self, type_list_csv: str) -> FormatSpec:
        """
        Resolve the list, failing when no token is known.

        Raises:
            UnsupportedFormatError: If the list resolves to UNKNOWN_FORMAT
        """
        spec = self.resolve(type_list_csv)
        if not spec.is_valid:
            raise UnsupportedFormatError(type_list_csv)
        return spec


format_resolver = FormatResolver()


def resolve_format(type_list_csv: str) -> FormatSpec:
    """Convenience function to resolve a destination-type list."""
    return format_resolver.resolve(type_list_csv)
