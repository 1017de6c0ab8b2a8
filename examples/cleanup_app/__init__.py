"""
Resource-cleanup sample application showcasing multierr.
"""

from .demo import Dummy, close_all, run_demo, sprinkle_magic_dust

__all__ = ["Dummy", "close_all", "run_demo", "sprinkle_magic_dust"]
