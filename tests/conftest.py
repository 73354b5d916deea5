import json
from pathlib import Path

import pytest
from PIL import Image

from photolog.config import SiteConfig

TEMPLATE = """\
<ul>
{% for post in posts %}<li><img src="images/{{ post.image }}" alt="{{ post.caption }}">{{ post.title }}</li>
{% endfor %}</ul>
"""


def make_jpeg(path: Path, size=(2880, 1920), color=(200, 40, 40)):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, "JPEG")
    return path


def write_index(path: Path, posts: list[dict]):
    path.write_text(json.dumps({"posts": posts}, indent=2), encoding="utf-8")


@pytest.fixture
def site(tmp_path) -> SiteConfig:
    """An empty project: template, empty index, empty images dir."""
    config = SiteConfig.from_root(tmp_path)
    config.template.parent.mkdir(parents=True)
    config.template.write_text(TEMPLATE, encoding="utf-8")
    config.images_dir.mkdir(parents=True)
    write_index(config.index_json, [])
    return config
