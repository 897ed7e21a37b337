"""
redundant-sentences: find sentences that recur across exported discussion threads.
"""

__version__ = "0.3.0"
