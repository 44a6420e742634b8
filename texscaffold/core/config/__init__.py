"""
Configuration — texscaffold.yml and answers files.
"""
