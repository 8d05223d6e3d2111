from adapters.platform_lists.loader import load_platforms_file, resolve_platforms
from adapters.platform_lists.models import PlatformsFile

__all__ = [
    "PlatformsFile",
    "load_platforms_file",
    "resolve_platforms",
]
