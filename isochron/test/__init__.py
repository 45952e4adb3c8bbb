"""
# Test harness used by the modules of the &isochron packages.
"""
