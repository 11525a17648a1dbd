"""
User directory: profiles, uniqueness and password hashing.
"""
