from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from skyline_art.config import RawValue


@dataclass(frozen=True)
class ArtSource:
    """Plugin describing one art version.

    Attributes:
        version: Registry key selected on the command line (e.g. ``"6"``).
        name: Human-readable scene name.
        usage: Positional arguments and their defaults, for help output.
        build_config: (raw positional values, seed) -> config, with clamping.
        render: config -> final text block (art plus attribution).
    """

    version: str
    name: str
    usage: str
    build_config: Callable[[Sequence[RawValue], Optional[int]], Any]
    render: Callable[[Any], str]


_ART_SOURCE_REGISTRY: List[ArtSource] = []
_VERSION_INDEX: Dict[str, ArtSource] = {}


def register_art_source(source: ArtSource) -> None:
    if source.version in _VERSION_INDEX:
        # Re-registering a version replaces the previous entry in place.
        existing_idx = next(
            i
            for i, s in enumerate(_ART_SOURCE_REGISTRY)
            if s.version == source.version
        )
        _ART_SOURCE_REGISTRY[existing_idx] = source
    else:
        _ART_SOURCE_REGISTRY.append(source)
    _VERSION_INDEX[source.version] = source


def all_art_sources() -> List[ArtSource]:
    """Return registered sources sorted by version."""
    return sorted(_ART_SOURCE_REGISTRY, key=lambda s: s.version)


def find_art_source(version: str) -> Optional[ArtSource]:
    return _VERSION_INDEX.get(version)
