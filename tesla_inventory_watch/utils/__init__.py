"""
Utility modules for the Tesla Inventory Watch.
"""
