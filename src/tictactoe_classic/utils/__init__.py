"""
Utilities - front-end configuration.
"""

from tictactoe_classic.utils.config import Config, DEFAULT_CONFIG

__all__ = ["Config", "DEFAULT_CONFIG"]
