"""
Market-data provider clients.

The only module in the package that performs network I/O. Fetches complete
(or fail) before any engine call is made.
"""

from .alpha_vantage import AlphaVantageClient

__all__ = ["AlphaVantageClient"]
