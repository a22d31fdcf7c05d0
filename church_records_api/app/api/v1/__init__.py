"""
Version 1 of the Church Records API.
"""
