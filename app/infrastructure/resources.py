"""Bundled application resources."""

from pathlib import Path

RESOURCES_DIR = Path(__file__).parent.parent / "resources"
DEFAULT_IMAGE_PATH = RESOURCES_DIR / "images" / "sin-imagen.png"


def load_default_image() -> bytes:
    """
    Load the placeholder image shown for cars without a picture.

    Returns:
        Raw bytes of the bundled default image
    """
    return DEFAULT_IMAGE_PATH.read_bytes()
