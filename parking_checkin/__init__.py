"""
Parking Check-in - slot grid and check-in form backed by a remote booking API.
"""

__version__ = "1.0.0"
