from . import schotter_source, skyline_source  # registration side-effects
from .base import (
    ArtSource,
    all_art_sources,
    find_art_source,
    register_art_source,
)
from .schotter_source import SchotterConfig, schotter_command
from .skyline_source import SkylineConfig, skyline_command

__all__ = [
    "ArtSource",
    "all_art_sources",
    "find_art_source",
    "register_art_source",
    "SchotterConfig",
    "SkylineConfig",
    "schotter_command",
    "skyline_command",
]

# Touch imported modules to placate static analyzers (ensures side-effects retained)
_ = (schotter_source, skyline_source)
