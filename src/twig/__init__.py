"""
twig - interactive git branch switcher

A small terminal UI for picking a local branch to switch to,
with confirmed branch deletion.

Created: 2026-10-18
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
