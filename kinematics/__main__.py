"""
Entry point for running kinematics as a module.

Usage:
    python -m kinematics --u 0 --a 2 --t 3
"""

import sys

from kinematics.cli import main

if __name__ == "__main__":
    sys.exit(main())
