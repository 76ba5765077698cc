"""
Configuration package for the AIOps review dashboard.
"""
