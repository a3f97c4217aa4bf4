#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
output.py - Console output helpers for Rhyolite
"""

from ..core.config import config


def vprint(*args, **kwargs):
    """Print only when verbose output is enabled."""
    if config["verbose"]:
        print(*args, **kwargs)

