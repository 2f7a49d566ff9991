"""
Affine warp entry point.

Usage:

    python main.py x_scale y_scale x_translation y_translation theta k_value

Reads test.gif from the working directory and writes output.gif; see
affine_warp.cli for the optional flags.
"""

import sys

from affine_warp.cli import main


if __name__ == "__main__":
    sys.exit(main())
