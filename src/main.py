"""Entry point for the Third Horizon Compendium viewer.

Runs the curses viewer from a source checkout: ``python src/main.py``.
"""
import sys

from compendium.app import main

if __name__ == "__main__":
    sys.exit(main())
