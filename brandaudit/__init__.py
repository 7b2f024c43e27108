"""
brandaudit - search presence control audits for small businesses
"""

__version__ = "0.1.0"
