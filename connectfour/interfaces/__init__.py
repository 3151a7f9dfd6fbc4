"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the input provider contract and the console interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
