"""Default platform set.

Platforms are plain `{key, domain}` data; the verifier never branches on a
specific key, so extending the set only means adding an entry here or in a
platforms JSON file (see `adapters.platform_lists`).
"""

from __future__ import annotations

from core.domain.models import Platform


DEFAULT_PLATFORMS: tuple[Platform, ...] = (
    Platform(key="toogoodtogo", domain="toogoodtogo.com"),
    Platform(key="flashfood", domain="flashfood.com"),
    Platform(key="foodhero", domain="foodhero.com"),
)
