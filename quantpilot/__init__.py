"""
QuantPilot - Portfolio Analytics Core

Indicator and performance-analytics engine behind the QuantPilot portfolio
dashboard. Turns daily price series from the market-data provider into
chart-ready technical indicators, risk/performance statistics, benchmark
comparisons, trading signals and assistant context.
"""

__version__ = "0.1.0"
__author__ = "QuantPilot Team"
