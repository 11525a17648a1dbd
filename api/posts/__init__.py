"""
Posts with author-only mutation.
"""
