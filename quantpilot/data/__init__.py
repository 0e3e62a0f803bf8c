"""
Market data models, provider payload parsing and series validation.

Price series, quotes and fundamentals enter the system here. Everything
downstream (indicators, analytics) receives already-parsed PriceBar lists.
"""
