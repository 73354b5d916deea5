"""Error classifications for a build.

A ``BuildError`` stops the rest of the build step. An ``ImageError`` only
costs the one image it happened on.
"""


class PhotologError(Exception):
    pass


class BuildError(PhotologError):
    """Abort the remaining build steps."""


class ImageError(PhotologError):
    """Skip this image and carry on with the next post."""
