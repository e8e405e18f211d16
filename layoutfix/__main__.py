#!/usr/bin/env python3
"""
layoutfix entry point for running as a module: python3 -m layoutfix
"""

import sys
from layoutfix.cli import main

if __name__ == '__main__':
    sys.exit(main())
