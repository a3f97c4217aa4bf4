#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
signals.py - Graceful keyboard interrupt handling for the Rhyolite CLI

An index walk may touch many files; on CTRL+C we finish the current line
of output and exit with the conventional status instead of a traceback.
Files already written stay written.
"""

import signal
import sys

# Standard exit code for SIGINT
EXIT_INTERRUPTED = 130

_interrupt_in_progress = False


def _handle_interrupt(signum, frame):
    """
    Signal handler for SIGINT and SIGTERM.

    Args:
        signum: Signal number
        frame: Current stack frame
    """
    global _interrupt_in_progress

    if _interrupt_in_progress:
        sys.exit(EXIT_INTERRUPTED)

    _interrupt_in_progress = True
    print("\n! Interrupted. Index files written so far have been kept.", file=sys.stderr)
    sys.exit(EXIT_INTERRUPTED)


def setup_interrupt_handling():
    """Install the interrupt handlers. Call this at program start."""
    signal.signal(signal.SIGINT, _handle_interrupt)
    signal.signal(signal.SIGTERM, _handle_interrupt)
