#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
__main__.py - Entry point for the rhyolite package

This file allows the package to be run directly with:
python -m rhyolite
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
