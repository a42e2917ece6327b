#!/usr/bin/env python3
"""
Dino Run desktop client.

    python -m dino_run [--db FILE] [--width W] [--height H] [--hitboxes] [-v]
"""

import argparse
import logging

from .app import DinoRunApp
from .constants import DB_FILE, SCREEN_WIDTH, SCREEN_HEIGHT
from .storage import SettingsStore


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="dino_run", description="Side-scrolling runner game.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file for the high score and settings")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--hitboxes", action="store_true", help="Outline collision boxes")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # pygame is only needed for the desktop frontend
    from .pygame_client import PygameFrontend, PygameDisplay, LoggingHaptics

    frontend = PygameFrontend(args.width, args.height)
    app = DinoRunApp(
        store=SettingsStore(args.db),
        screen_width=args.width,
        screen_height=args.height,
        renderer=frontend,
        haptics=LoggingHaptics(),
        display=PygameDisplay(),
        measurer=frontend,
        debug_hitboxes=args.hitboxes,
    )
    app.create()
    frontend.attach(app.loop)
    try:
        app.loop.run()
    except KeyboardInterrupt:
        pass
    finally:
        app.destroy()


if __name__ == "__main__":
    main()
