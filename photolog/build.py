"""The build step: reconcile the index, render HTML, resize images."""

import sys
from dataclasses import dataclass, field

from .config import SiteConfig
from .errors import BuildError
from .images import ImageOutcome, ImageStatus, process_images
from .posts import Post, load_index, save_index
from .reconcile import reconcile_index
from .render import render_html


@dataclass
class BuildReport:
    added: list[Post] = field(default_factory=list)
    outcomes: list[ImageOutcome] = field(default_factory=list)
    html_written: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def _count(self, status: ImageStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def written(self) -> int:
        return self._count(ImageStatus.WRITTEN)

    @property
    def skipped(self) -> int:
        return self._count(ImageStatus.SKIPPED)

    @property
    def failed(self) -> list[ImageOutcome]:
        return [o for o in self.outcomes if o.status is ImageStatus.FAILED]


def build(config: SiteConfig) -> BuildReport:
    """Run every build step in order, stopping at the first BuildError.

    Never raises for a failed build; check ``report.ok``.
    """
    report = BuildReport()
    try:
        _run(config, report)
    except BuildError as e:
        report.error = str(e)
        print(f"Build failed: {e}", file=sys.stderr)
    return report


def _run(config: SiteConfig, report: BuildReport):
    print("Step 1: Loading index...")
    index = load_index(config.index_json)
    print(f"  Loaded {len(index.posts)} posts from {config.index_json}")

    print("Step 2: Looking for new images...")
    report.added = reconcile_index(index, config.images_dir)
    if report.added:
        save_index(index, config.index_json)
        for post in report.added:
            print(f"  Added placeholder post for {post.image}")
        print(f"  Rewrote {config.index_json} ({len(index.posts)} posts)")
    else:
        print("  Every image already has a post")

    print("Step 3: Generating HTML...")
    render_html(index, config.template, config.output_html)
    report.html_written = True
    print(f"  Wrote {config.output_html}")

    print("Step 4: Resizing images...")
    report.outcomes = process_images(index, config.images_dir, config.images_output_dir)
    print(f"  {report.written} resized, {report.skipped} already present, "
          f"{len(report.failed)} failed")
