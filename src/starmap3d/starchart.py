"""CLI entry point for star map generation.

    uv run python -m starmap3d.starchart --catalog resources/stars.json --pick 0 0
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from starmap3d.catalog import CatalogError, run  # noqa: E402
from starmap3d.models import Camera  # noqa: E402
from starmap3d.picker import format_star_info, pick, ray_from_ndc  # noqa: E402
from starmap3d.renderers.static import save_static_chart  # noqa: E402

logger = logging.getLogger("starmap3d")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a 3D star catalog to PNG.")
    parser.add_argument("--catalog", help="Catalog path or URL (default: $STARMAP3D_CATALOG)")
    parser.add_argument("--output", help="PNG output path (default: results/<catalog>__3d.png)")
    parser.add_argument("--no-sun", action="store_true", help="Do not add the Sun at the origin")
    parser.add_argument(
        "--pick",
        nargs=2,
        type=float,
        metavar=("NDC_X", "NDC_Y"),
        help="Report the star under this screen point, seen from the default camera",
    )
    parser.add_argument("--lang", default=os.environ.get("STARMAP3D_LANG", "en"))
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = run(args.catalog, include_sun=not args.no_sun)
    except CatalogError as e:
        logger.error("%s", e)
        return 1

    path = save_static_chart(catalog, Path(args.output) if args.output else None)
    print(f"Saved: {path}")

    if args.pick is not None:
        ray = ray_from_ndc(args.pick[0], args.pick[1], Camera())
        hit = pick(ray, catalog.entities)
        print(format_star_info(hit.entity, args.lang) if hit else "No star at that point.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
