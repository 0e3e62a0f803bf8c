"""
Utility functions module.

Period/timeframe translation and timestamp helpers shared across the
package. Bar dates are ISO calendar dates ("YYYY-MM-DD"); generated
timestamps (signals, alerts) are ISO-8601 UTC.
"""
