"""The post index: source/index.json loaded into Post records and written back."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .errors import BuildError

PLACEHOLDER_TITLE = "New"
PLACEHOLDER_CAPTION = "Meaningful caption"


@dataclass
class Post:
    title: str
    caption: str
    image: str


@dataclass
class PostIndex:
    posts: list[Post] = field(default_factory=list)

    def used_images(self) -> set[str]:
        return {p.image for p in self.posts}

    def to_dict(self) -> dict:
        return {"posts": [asdict(p) for p in self.posts]}


def placeholder_post(image: str) -> Post:
    return Post(title=PLACEHOLDER_TITLE, caption=PLACEHOLDER_CAPTION, image=image)


def load_index(path: Path) -> PostIndex:
    """Read the index. Unknown fields are ignored, missing ones read as empty."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise BuildError(f"Error opening index {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BuildError(f"Error parsing index {path}: {e}") from e

    if not isinstance(data, dict):
        raise BuildError(f"Error parsing index {path}: expected a JSON object")
    raw_posts = data.get("posts")
    if raw_posts is None:
        raw_posts = []
    if not isinstance(raw_posts, list):
        raise BuildError(f"Error parsing index {path}: 'posts' must be a list")

    posts = []
    for i, p in enumerate(raw_posts):
        if not isinstance(p, dict):
            raise BuildError(f"Error parsing index {path}: post #{i} is not an object")
        fields = {}
        for name in ("title", "caption", "image"):
            value = p.get(name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise BuildError(f"Error parsing index {path}: post #{i} field {name!r} must be a string")
            fields[name] = value
        posts.append(Post(**fields))
    return PostIndex(posts)


def save_index(index: PostIndex, path: Path):
    """Overwrite the index file with 2-space indented JSON."""
    try:
        text = json.dumps(index.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise BuildError(f"Error serializing index: {e}") from e
    try:
        Path(path).write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Error writing index {path}: {e}") from e
