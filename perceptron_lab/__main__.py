"""
Entry point for running perceptron lab as a module.

Usage:
    python -m perceptron_lab or
    python -m perceptron_lab network --verbose
"""

import sys

from .cli import main


if __name__ == '__main__':
    sys.exit(main())
