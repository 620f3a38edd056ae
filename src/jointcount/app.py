"""JointCount application entry point.

Wires together config, event bus and the main window.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from jointcount.constants import ASSET_GENERATOR
from jointcount.core.config_loader import load_widget_config
from jointcount.core.events import EventBus, EventType
from jointcount.core.errors import JointCountError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jointcount",
        description="Record tender and swollen joint counts on a body diagram.",
        epilog=f"The body image and audio cues are not bundled; run "
               f"{ASSET_GENERATOR} to create placeholders.",
    )
    parser.add_argument("--scale", type=float, default=None,
                        help="Diagram scale relative to the full-size image")
    parser.add_argument("--tjc", default="", metavar="IDS",
                        help='Preselected tender joints, e.g. "3;9"')
    parser.add_argument("--sjc", default="", metavar="IDS",
                        help='Preselected swollen joints, e.g. "1;2"')
    parser.add_argument("--no-sound", action="store_true",
                        help="Disable audio cues")
    parser.add_argument("--config", type=Path, default=None,
                        help="Widget config JSON (default: assets/config/widget.json)")
    parser.add_argument("--export", type=Path, default=None, metavar="DIR",
                        help="Write PNG snapshots to DIR on exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the JointCount application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(name)s: %(message)s")
    logger = logging.getLogger("jointcount")

    app = QApplication(sys.argv[:1])
    config = load_widget_config(args.config)
    event_bus = EventBus()
    event_bus.subscribe(
        EventType.JOINT_TOGGLED,
        lambda joint_id, selected, assessment_type: logger.debug(
            "%s %d %s", assessment_type.upper(), joint_id, "on" if selected else "off"),
    )

    # Imported here so argparse errors do not pay for widget imports
    from jointcount.ui.main_window import MainWindow

    try:
        window = MainWindow(
            event_bus,
            selected_joints={"tjc": args.tjc, "sjc": args.sjc},
            config=config,
            scale=args.scale,
            play_sound=False if args.no_sound else None,
        )
    except JointCountError as e:
        logger.error("Cannot start assessment: %s", e)
        return 2

    window.show()
    code = app.exec()

    results = window.results()
    for kind, ids in results.items():
        logger.info("%s: %s", kind.upper(), ";".join(map(str, ids)) or "none")
    if args.export is not None:
        window.export_snapshots(args.export)
    return code


if __name__ == "__main__":
    sys.exit(main())
