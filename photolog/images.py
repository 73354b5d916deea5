"""Resized JPEG copies of every posted image."""

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import BuildError, ImageError
from .posts import PostIndex

TARGET_WIDTH = 1440


class ImageStatus(enum.Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ImageOutcome:
    image: str
    destination: Path
    status: ImageStatus
    message: str = ""


def resize_image(src: Path, dst: Path, width: int = TARGET_WIDTH):
    """Scale src to `width` pixels wide, keeping aspect ratio, and save as JPEG.

    No quality is passed, so Pillow's JPEG default applies.
    """
    try:
        f = open(src, "rb")
    except OSError as e:
        raise ImageError(f"Error opening source image {src}: {e}") from e

    try:
        with f, Image.open(f) as img:
            img = img.convert("RGB")
            w, h = img.size
            height = max(1, round(h * width / w))
            img = img.resize((width, height), Image.LANCZOS)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageError(f"Error decoding image {src}: {e}") from e

    try:
        img.save(dst, "JPEG")
    except (OSError, ValueError) as e:
        # A partial file here would be skipped by every later build.
        Path(dst).unlink(missing_ok=True)
        raise ImageError(f"Error saving resized image {dst}: {e}") from e


def process_images(index: PostIndex, images_dir: Path, output_dir: Path) -> list[ImageOutcome]:
    """Resize each post's image into output_dir, in index order.

    An image already present in output_dir is left alone. A failure on one
    image is recorded and the loop moves on.
    """
    images_dir = Path(images_dir)
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BuildError(f"Error creating images output directory {output_dir}: {e}") from e

    outcomes = []
    total = len(index.posts)
    for i, post in enumerate(index.posts):
        src = images_dir / post.image
        name = os.path.basename(post.image)
        dst = output_dir / name

        if not name:
            print(f"  [{i+1}/{total}] Post {post.title!r} has no image")
            outcomes.append(ImageOutcome(post.image, dst, ImageStatus.FAILED, "no image"))
        elif dst.exists():
            outcomes.append(ImageOutcome(post.image, dst, ImageStatus.SKIPPED))
        else:
            try:
                resize_image(src, dst)
            except ImageError as e:
                print(f"  [{i+1}/{total}] {e}")
                outcomes.append(ImageOutcome(post.image, dst, ImageStatus.FAILED, str(e)))
            else:
                outcomes.append(ImageOutcome(post.image, dst, ImageStatus.WRITTEN))

        if (i + 1) % 100 == 0 or i + 1 == total:
            print(f"  [{i+1}/{total}] processed")
    return outcomes
