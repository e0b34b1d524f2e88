"""
Arcade Pong: a human paddle against a reactive CPU paddle
"""

__version__ = "0.1.0"
