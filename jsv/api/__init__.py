"""
jsv/api package marker.
"""
