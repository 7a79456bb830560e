from __future__ import annotations

from typing import Optional


def resolve_image_url(image_url: Optional[str], origin: str) -> Optional[str]:
    """Absolute (http...) references pass through; relative paths hang off the backend origin."""
    if not image_url:
        return None
    if image_url.startswith("http"):
        return image_url
    return f"{origin.rstrip('/')}{image_url}"
