#!/usr/bin/env python3
"""
Game Shelf - Main Application
Terminal catalog for a personal video game collection.
"""

import sys
from pathlib import Path

# Add the project root to the path so the package runs from a checkout
sys.path.insert(0, str(Path(__file__).parent))

from game_shelf.tui import main


if __name__ == "__main__":
    sys.exit(main())
