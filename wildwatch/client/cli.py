"""
Command-line field session.

    wildwatch-client photo.jpg call.wav --map sightings.html --pdf report.pdf

Each file is uploaded in order within one session; the session's reports
are printed at the end and optionally rendered to a map and a PDF.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .capture import guess_kind
from .controller import FieldApp
from .location import EnvLocationProvider, StaticLocationProvider
from .upload import UploadClient


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="wildwatch-client", description="Submit wildlife media for a distress assessment.")
    p.add_argument("files", nargs="*", help="images and/or audio recordings, uploaded in order")
    p.add_argument("--backend", help="relay base URL (default: WILDWATCH_BACKEND_URL)")
    p.add_argument("--lat", type=float, help="device latitude (default: WILDWATCH_LATITUDE)")
    p.add_argument("--lon", type=float, help="device longitude (default: WILDWATCH_LONGITUDE)")
    p.add_argument("--filter", choices=["image", "audio"], default="image", help="marker type shown on the map")
    p.add_argument("--map", dest="map_path", help="write the map HTML here")
    p.add_argument("--pdf", dest="pdf_path", help="export all reports to this PDF")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s:%(message)s",
    )

    if args.lat is not None and args.lon is not None:
        provider = StaticLocationProvider((args.lat, args.lon))
    else:
        provider = EnvLocationProvider()

    app = FieldApp(UploadClient(base_url=args.backend), provider)
    app.start()
    print(app.location_banner)

    for path in args.files:
        kind = guess_kind(path)
        if kind == "image":
            outcome = app.pick_image(path)
        elif kind == "audio":
            outcome = app.pick_audio(path)
        else:
            print(f"⚠️ Skipping {path}: not an image or audio file.")
            continue

        print(f"\n[{kind.upper()}] {path}")
        print(app.analysis or "Nothing uploaded.")

    print()
    print(app.reports_text())

    app.set_filter(args.filter)
    if args.map_path:
        written = app.render_map(args.map_path)
        if written:
            print(f"\n🗺  Map written to {written}")
        else:
            print(f"\n🗺  No map: {app.location_banner}")

    if args.pdf_path:
        ok, message = app.export_pdf(args.pdf_path)
        print(f"\n📄 PDF written to {message}" if ok else f"\n{message}")
        if not ok:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
