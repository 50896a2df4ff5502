"""Qt application entry point for the Agritech dashboard.

This module wires up argument parsing and logging, loads the YAML
configuration, builds the channel controllers, and starts the Qt event loop.
All GUI launches, through ``python main.py`` or
``python -m agritech.gui.application``, flow through ``main()`` here.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Tuple

import pyqtgraph as pg
from PySide6.QtCore import QLoggingCategory
from PySide6.QtWidgets import QApplication

from ..config import DashboardConfig, load_config
from ..core.dashboard import build_dashboard
from .main_window import MainWindow

_PG_CONFIGURED = False


def configure_pyqtgraph() -> None:
    """Apply global pyqtgraph options once, before any plot is created."""
    global _PG_CONFIGURED
    if _PG_CONFIGURED:
        return
    pg.setConfigOptions(antialias=True, background="#1b4332", foreground="w")
    _PG_CONFIGURED = True


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Agritech simulated sensor dashboard")
    parser.add_argument(
        "--config",
        type=str,
        default=os.environ.get("AGRITECH_CONFIG"),
        help="YAML configuration file (default: $AGRITECH_CONFIG, else built-in presets)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for reproducible simulations (overrides the config file)",
    )
    parser.add_argument(
        "--render-fps",
        type=float,
        default=None,
        help="Gauge animation refresh rate in Hz (default: 60)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def _parse_cli_args(
    argv: list[str],
) -> tuple[argparse.Namespace, list[str]]:
    parser = _build_arg_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args, qt_argv


def _resolve_config(args: argparse.Namespace) -> DashboardConfig:
    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed
    if args.render_fps is not None:
        cfg.render_fps = args.render_fps
    return cfg.sanitized()


def create_app(
    argv: list[str] | None = None,
    *,
    config: DashboardConfig | None = None,
) -> Tuple[QApplication, MainWindow]:
    """
    Create the QApplication and the main dashboard window.

    Parameters
    ----------
    argv:
        Optional argument list to pass to :class:`QApplication`.
    config:
        Dashboard configuration; built-in presets when omitted.

    Returns
    -------
    app:
        The QApplication instance (owned by caller).
    window:
        The main window with one tab per screen, not yet started.
    """
    qt_args = argv if argv is not None else sys.argv
    configure_pyqtgraph()
    app = QApplication.instance() or QApplication(qt_args)

    # Suppress noisy QObject::connect warnings from QStyleHints and similar internals
    QLoggingCategory.setFilterRules("qt.core.qobject.connect=false")

    dashboard = build_dashboard(config or DashboardConfig())
    window = MainWindow(dashboard)
    return app, window


def main(argv: list[str] | None = None) -> None:
    raw_argv = argv if argv is not None else sys.argv
    args, qt_argv = _parse_cli_args(raw_argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = _resolve_config(args)
    app, win = create_app(qt_argv, config=config)
    win.show()
    win.start()
    raise SystemExit(app.exec())


if __name__ == "__main__":
    main()
