"""
Tesla Inventory Watch

Polls the public Tesla used-vehicle inventory search, picks out Model 3
listings below a price ceiling and above a range floor, and posts one
Telegram message per match.
"""

__version__ = "0.1.0"
__author__ = "Tesla Inventory Watch Team"
