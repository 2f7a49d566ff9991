"""
Image I/O utilities for loading and saving images.
"""

import cv2
import numpy as np
from pathlib import Path
from PIL import Image, UnidentifiedImageError


def load_image(image_path):
    """
    Load an image from file path.

    GIF files (and anything else Pillow understands) are decoded with Pillow;
    OpenCV is tried for formats Pillow rejects.

    Args:
        image_path: Path to the image file

    Returns:
        Image as numpy array of shape (rows, cols, 3), RGB, uint8

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If neither decoder can read the file
    """
    image_path = Path(image_path)
    if not image_path.exists():
        raise FileNotFoundError(f"Image not found: {image_path}")

    try:
        with Image.open(image_path) as pil_img:
            return np.array(pil_img.convert("RGB"))
    except (UnidentifiedImageError, OSError):
        pass

    img = cv2.imread(str(image_path), cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image: {image_path}")

    return bgr_to_rgb(img)


def save_image(image_path, rgb):
    """
    Save an RGB image to disk. The format follows the file extension.

    Args:
        image_path: Destination path
        rgb: Image as numpy array (rows, cols, 3) in RGB order

    Returns:
        The written path

    Raises:
        ValueError: If the encoder cannot write the file
        OSError: If the destination directory cannot be created
    """
    image_path = Path(image_path)
    image_path.parent.mkdir(parents=True, exist_ok=True)
    rgb = ensure_uint8(rgb)

    # OpenCV has no GIF encoder; Pillow quantizes to a 256-color palette, so
    # GIF output is lossy for images with more colors
    if image_path.suffix.lower() == ".gif":
        Image.fromarray(np.ascontiguousarray(rgb)).save(image_path)
        return image_path

    try:
        written = cv2.imwrite(str(image_path), rgb_to_bgr(rgb))
    except cv2.error as exc:
        raise ValueError(f"Could not write image: {image_path} ({exc})") from exc
    if not written:
        raise ValueError(f"Could not write image: {image_path}")
    return image_path


def ensure_uint8(image):
    """Convert image to uint8 if needed (with clipping)."""
    image = np.asarray(image)
    if image.dtype == np.uint8:
        return image
    return np.clip(image, 0, 255).astype(np.uint8)


def bgr_to_rgb(img):
    """
    Convert BGR image (OpenCV format) to RGB.

    Args:
        img: Image in BGR format

    Returns:
        Image in RGB format
    """
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def rgb_to_bgr(img):
    """
    Convert RGB image to BGR (OpenCV format).

    Args:
        img: Image in RGB format

    Returns:
        Image in BGR format
    """
    return cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
