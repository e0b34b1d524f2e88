#!/usr/bin/env python3
"""
Main script to launch Arcade Pong with PyGame graphical interface
"""

import importlib.util
import sys

try:
    from arcade_pong.gui.game_app import main
    from arcade_pong.utils.config import game_config

except ImportError as e:
    print(f"Import error: {e}")
    print()
    print("Checking dependencies:")
    for package in ("pygame", "numpy", "pydantic"):
        if importlib.util.find_spec(package) is not None:
            print(f"✓ {package} is installed")
        else:
            print(f"✗ {package} is not installed - pip install {package}")
    sys.exit(1)

if __name__ == "__main__":
    print("=== ARCADE PONG ===")
    print("You (left) against the computer (right)")
    print()

    controls = game_config.get_keyboard_layout().display_names
    print("CONTROLS:")
    print(f"  Up: {controls['up']}    Down: {controls['down']}    (or move the mouse)")
    print(f"  {controls['restart']}: Reset scores and serve again")
    print("  ESC: Quit")
    print()

    main(sys.argv[1:])
