"""TMDb image URL helpers."""

from typing import Optional

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
IMAGE_SIZES = ("w200", "w300", "w400", "w500", "original")


def tmdb_image_url(
    path: Optional[str], size: str = "w500", base_url: str = TMDB_IMAGE_BASE_URL
) -> Optional[str]:
    """Build a full image URL from a TMDb image path.

    Args:
        path: Image path as returned by TMDb, e.g. "/abc.jpg".
        size: One of IMAGE_SIZES.
        base_url: Image CDN base URL.

    Returns:
        Image URL, or None when there is no image.

    Raises:
        ValueError: If size is not supported.
    """
    if size not in IMAGE_SIZES:
        raise ValueError(f"Image size must be one of: {IMAGE_SIZES}")
    if not path:
        return None
    return f"{base_url.rstrip('/')}/{size}{path}"
