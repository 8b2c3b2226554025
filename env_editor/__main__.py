"""
Make env_editor runnable as a module.

Usage:
    python -m env_editor append PATH ~/.local/bin --persist
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
