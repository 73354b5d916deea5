from dataclasses import dataclass
from pathlib import Path

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

SOURCE_DIR = Path("source")
INDEX_JSON = SOURCE_DIR / "index.json"
IMAGES_DIR = SOURCE_DIR / "images"
TEMPLATE_PATH = Path("template") / "index.html"

PUBLIC_DIR = Path("public")
OUTPUT_HTML = PUBLIC_DIR / "index.html"
IMAGES_OUTPUT_DIR = PUBLIC_DIR / "images"

HOST = ""
PORT = 8080


@dataclass
class SiteConfig:
    index_json: Path = INDEX_JSON
    images_dir: Path = IMAGES_DIR
    template: Path = TEMPLATE_PATH
    output_html: Path = OUTPUT_HTML
    images_output_dir: Path = IMAGES_OUTPUT_DIR

    @classmethod
    def from_root(cls, root: Path, template: Path | None = None,
                  public: Path | None = None) -> "SiteConfig":
        """Resolve the default layout under a project root.

        ``template`` and ``public`` are taken relative to ``root`` unless absolute.
        """
        root = Path(root)
        public_dir = root / (public if public is not None else PUBLIC_DIR)
        return cls(
            index_json=root / INDEX_JSON,
            images_dir=root / IMAGES_DIR,
            template=root / (template if template is not None else TEMPLATE_PATH),
            output_html=public_dir / OUTPUT_HTML.name,
            images_output_dir=public_dir / IMAGES_OUTPUT_DIR.name,
        )

    @property
    def public_dir(self) -> Path:
        return self.output_html.parent
