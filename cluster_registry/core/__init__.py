"""
Core settings and node registry
"""
