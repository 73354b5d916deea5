"""Find images nobody posted yet and give each one a placeholder post."""

import os
from pathlib import Path

from .errors import BuildError
from .posts import Post, PostIndex, placeholder_post

IMAGE_EXTENSIONS = {".jpg", ".jpeg"}


def _raise(err: OSError):
    raise err


def scan_images(images_dir: Path) -> list[str]:
    """Base names of every .jpg/.jpeg under images_dir, recursively.

    Matching is case-sensitive, so IMG_0001.JPG is not picked up.
    """
    images_dir = Path(images_dir)
    if not images_dir.is_dir():
        raise BuildError(f"Error walking images directory {images_dir}: not a directory")

    names = []
    try:
        for dirpath, _dirnames, filenames in os.walk(images_dir, onerror=_raise):
            for name in filenames:
                if os.path.splitext(name)[1] not in IMAGE_EXTENSIONS:
                    continue
                if os.path.isfile(os.path.join(dirpath, name)):
                    names.append(name)
    except OSError as e:
        raise BuildError(f"Error walking images directory {images_dir}: {e}") from e
    return names


def find_unused_images(index: PostIndex, images_dir: Path) -> list[str]:
    """Image names on disk that no post references, in lexicographic order.

    Walk order differs between filesystems, so names are sorted to keep
    builds reproducible.
    """
    used = index.used_images()
    return sorted({name for name in scan_images(images_dir) if name not in used})


def reconcile_index(index: PostIndex, images_dir: Path) -> list[Post]:
    """Prepend a placeholder post for every unused image.

    The last image found ends up first in the feed. Returns the new posts;
    an empty list means the index was not touched.
    """
    unused = find_unused_images(index, images_dir)
    if not unused:
        return []
    added = [placeholder_post(name) for name in reversed(unused)]
    index.posts[:0] = added
    return added
