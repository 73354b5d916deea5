import argparse
import sys
from pathlib import Path

from .build import build
from .config import HOST, PORT, PUBLIC_DIR, TEMPLATE_PATH, SiteConfig
from .serve import ServerConfig, serve


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build and serve a static photo feed.")
    parser.add_argument("--root", default=".", help="Project directory holding source/ and template/.")
    parser.add_argument("--template", default=str(TEMPLATE_PATH), help="Template file, relative to --root.")
    parser.add_argument("--public", default=str(PUBLIC_DIR), help="Output directory, relative to --root.")
    parser.add_argument("--host", default=HOST, help="Address to bind (default: all interfaces).")
    parser.add_argument("--port", default=PORT, type=int, help="Port to serve on.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--serve", action="store_true", help="Serve the existing output without building.")
    mode.add_argument("--once", action="store_true", help="Build and exit without serving.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = SiteConfig.from_root(Path(args.root), template=Path(args.template), public=Path(args.public))

    if not args.serve:
        report = build(config)
        if report.ok:
            print(f"\nDone! Site written to {config.public_dir}/")
        if args.once:
            return 0

    server_config = ServerConfig(directory=config.public_dir, host=args.host, port=args.port)
    try:
        serve(server_config)
    except OSError as e:
        print(f"Server failed to start: {e}", file=sys.stderr)
        return 1
    return 0
