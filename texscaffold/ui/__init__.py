"""
User interfaces for texscaffold.
"""
