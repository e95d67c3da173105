"""
LabelHub - QR label printing service.
"""

__version__ = "1.0.0"
