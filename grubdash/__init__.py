"""
                GrubDash API

In-memory dishes and orders backend with chained request validation
and an order status state machine.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
