"""
trainbook: an in-memory train booking manager

An operator registers trains, sells and cancels seat reservations against a
fixed per-route seat pool, inspects state, and saves booking summaries to a
flat text file, all from an interactive text menu.
"""

__version__ = "0.1.0"
