"""
Result models module.

Immutable value types produced by the indicator and analytics engines.
Constructed fresh per request and never persisted.
"""
