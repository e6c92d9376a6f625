"""
Cipher subpackage - letter rotation.
"""

from textprims.cipher.rot13 import rot13

__all__ = ["rot13"]
