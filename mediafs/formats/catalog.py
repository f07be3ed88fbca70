"""Static catalog of supported destination formats.

Each destination-type token names exactly one container and binds one audio
codec and at most one video codec to it. The table is built once at import
time and checked for exhaustiveness and codec consistency, so a missing or
contradictory entry fails loudly instead of surfacing at lookup time.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple


class ContainerType(str, Enum):
    """Supported destination containers."""

    MP3 = "mp3"
    MP4 = "mp4"
    WAV = "wav"
    OGG = "ogg"
    WEBM = "webm"
    MOV = "mov"
    AIFF = "aiff"
    OPUS = "opus"
    PRORES = "prores"
    UNKNOWN = "unknown"


class MediaKind(str, Enum):
    """Media kind a codec encodes."""

    AUDIO = "audio"
    VIDEO = "video"
    NONE = "none"


class CodecId(str, Enum):
    """Codec identifiers, named after their ffmpeg codec names."""

    NONE = "none"
    # Audio
    MP3 = "mp3"
    AAC = "aac"
    PCM_S16LE = "pcm_s16le"
    PCM_S16BE = "pcm_s16be"
    VORBIS = "vorbis"
    OPUS = "opus"
    # Video
    H264 = "h264"
    THEORA = "theora"
    VP9 = "vp9"
    PRORES = "prores"
    # Still images, used for embedded album art
    MJPEG = "mjpeg"
    PNG = "png"
    BMP = "bmp"

    @property
    def kind(self) -> MediaKind:
        return _CODEC_KINDS[self]


_CODEC_KINDS: Dict[CodecId, MediaKind] = {
    CodecId.NONE: MediaKind.NONE,
    CodecId.MP3: MediaKind.AUDIO,
    CodecId.AAC: MediaKind.AUDIO,
    CodecId.PCM_S16LE: MediaKind.AUDIO,
    CodecId.PCM_S16BE: MediaKind.AUDIO,
    CodecId.VORBIS: MediaKind.AUDIO,
    CodecId.OPUS: MediaKind.AUDIO,
    CodecId.H264: MediaKind.VIDEO,
    CodecId.THEORA: MediaKind.VIDEO,
    CodecId.VP9: MediaKind.VIDEO,
    CodecId.PRORES: MediaKind.VIDEO,
    CodecId.MJPEG: MediaKind.VIDEO,
    CodecId.PNG: MediaKind.VIDEO,
    CodecId.BMP: MediaKind.VIDEO,
}


@dataclass(frozen=True)
class FormatSpec:
    """Resolved destination format.

    Attributes:
        destination_token: Lower-cased token the format was resolved from
        audio_codec: Audio codec written to the container
        video_codec: Video codec, CodecId.NONE for audio-only containers
        container_type: Container enumeration value, UNKNOWN when invalid
        container_name: Container name, also used as the file extension
    """

    destination_token: str
    audio_codec: CodecId
    video_codec: CodecId
    container_type: ContainerType
    container_name: str

    @property
    def is_valid(self) -> bool:
        return self.container_type is not ContainerType.UNKNOWN

    @property
    def has_video(self) -> bool:
        return self.video_codec is not CodecId.NONE

    @property
    def extension(self) -> str:
        return self.container_name


UNKNOWN_FORMAT = FormatSpec(
    destination_token="",
    audio_codec=CodecId.NONE,
    video_codec=CodecId.NONE,
    container_type=ContainerType.UNKNOWN,
    container_name="",
)


# container type -> (container name, audio codec, video codec)
_CATALOG_ENTRIES: Dict[ContainerType, Tuple[str, CodecId, CodecId]] = {
    ContainerType.MP3: ("mp3", CodecId.MP3, CodecId.NONE),
    ContainerType.MP4: ("mp4", CodecId.AAC, CodecId.H264),
    ContainerType.WAV: ("wav", CodecId.PCM_S16LE, CodecId.NONE),
    ContainerType.OGG: ("ogg", CodecId.VORBIS, CodecId.THEORA),
    ContainerType.WEBM: ("webm", CodecId.OPUS, CodecId.VP9),
    ContainerType.MOV: ("mov", CodecId.AAC, CodecId.H264),
    ContainerType.AIFF: ("aiff", CodecId.PCM_S16BE, CodecId.NONE),
    ContainerType.OPUS: ("opus", CodecId.OPUS, CodecId.NONE),
    ContainerType.PRORES: ("mov", CodecId.PCM_S16LE, CodecId.PRORES),
}

_ALBUM_ART_CONTAINERS: FrozenSet[ContainerType] = frozenset({ContainerType.MP3, ContainerType.MP4})

_ALBUM_ART_CODECS: FrozenSet[CodecId] = frozenset({CodecId.MJPEG, CodecId.PNG, CodecId.BMP})


def _build_catalog(
    entries: Mapping[ContainerType, Tuple[str, CodecId, CodecId]],
) -> Mapping[ContainerType, FormatSpec]:
    """Build the immutable catalog, validating every entry.

    Raises:
        ValueError: If a container type has no entry, UNKNOWN has one, or a
            codec sits in the slot of the wrong media kind.
    """
    missing = [t.value for t in ContainerType if t is not ContainerType.UNKNOWN and t not in entries]
    if missing:
        raise ValueError(f"Format catalog has no entry for: {', '.join(missing)}")
    if ContainerType.UNKNOWN in entries:
        raise ValueError("Format catalog must not contain an entry for UNKNOWN")

    catalog: Dict[ContainerType, FormatSpec] = {}
    for container_type, (container_name, audio_codec, video_codec) in entries.items():
        if not container_name:
            raise ValueError(f"{container_type.value}: container name is empty")
        if audio_codec.kind is not MediaKind.AUDIO:
            raise ValueError(f"{container_type.value}: {audio_codec.value} is not an audio codec")
        if video_codec is not CodecId.NONE and video_codec.kind is not MediaKind.VIDEO:
            raise ValueError(f"{container_type.value}: {video_codec.value} is not a video codec")

        catalog[container_type] = FormatSpec(
            destination_token=container_type.value,
            audio_codec=audio_codec,
            video_codec=video_codec,
            container_type=container_type,
            container_name=container_name,
        )

    return MappingProxyType(catalog)


class FormatCatalog:
    """Case-insensitive lookup of destination-type tokens."""

    def __init__(
        self,
        entries: Mapping[ContainerType, Tuple[str, CodecId, CodecId]] = _CATALOG_ENTRIES,
    ):
        """
        Initialize the catalog.

        Args:
            entries: Table of container type to (name, audio codec, video codec).
        """
        self._specs = _build_catalog(entries)

    def lookup(self, token: str) -> FormatSpec:
        """
        Look up a destination-type token.

        Args:
            token: Destination-type token, e.g. "mp4" or "PRORES"

        Returns:
            The matching FormatSpec, or UNKNOWN_FORMAT on a miss
        """
        if not token or not isinstance(token, str):
            return UNKNOWN_FORMAT

        try:
            container_type = ContainerType(token.strip().lower())
        except ValueError:
            return UNKNOWN_FORMAT

        return self._specs.get(container_type, UNKNOWN_FORMAT)

    def spec_for(self, container_type: ContainerType) -> FormatSpec:
        """Return the FormatSpec bound to a container type."""
        return self._specs.get(container_type, UNKNOWN_FORMAT)

    def tokens(self) -> List[str]:
        """Return every token the catalog resolves, in enumeration order."""
        return [t.value for t in ContainerType if t in self._specs]

    def specs(self) -> List[FormatSpec]:
        return [self._specs[t] for t in ContainerType if t in self._specs]

    @staticmethod
    def supports_album_art(container_type: ContainerType) -> bool:
        """Whether the container can carry embedded cover art."""
        # OGG could too, but needs special handling for its picture blocks
        return container_type in _ALBUM_ART_CONTAINERS

    @staticmethod
    def is_album_art_codec(codec: CodecId) -> bool:
        """Whether a codec is a still-image codec used for cover art streams."""
        return codec in _ALBUM_ART_CODECS


format_catalog = FormatCatalog()


def lookup_format(token: str) -> FormatSpec:
    """
    Convenience function to look up a destination-type token.

    Args:
        token: Destination-type token

    Returns:
        The matching FormatSpec, or UNKNOWN_FORMAT
    """
    return format_catalog.lookup(token)
