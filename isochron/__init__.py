"""
# Date-time calculations with zone resolution.
"""
