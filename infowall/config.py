"""
Info Wall - Main Ignis Configuration

This file is the entry point for Ignis. It loads settings and content,
builds the wall window and applies the stylesheet.

Usage:
  ignis init -c /path/to/infowall/config.py
  ignis open-window infowall
"""

import os

from ignis.app import IgnisApp
from loguru import logger

from infowall.panels.wall import WallPanel
from infowall.services.content import InfoWallContent
from infowall.utils.helpers import load_content, load_settings

config_dir = os.path.dirname(os.path.realpath(__file__))

app = IgnisApp.get_default()

try:
    app.apply_css(os.path.join(config_dir, "styles", "main.css"))
except Exception:
    logger.exception("Could not load main.css")

content = InfoWallContent(load_content(), load_settings())

wall_panel = WallPanel(content)
wall_window = wall_panel.create_window()

# Store panel reference on window for access from other modules
wall_window.panel = wall_panel

logger.info(f"Info wall initialized with {len(content.panels)} panels")
