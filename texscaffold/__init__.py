"""
texscaffold — interactive LaTeX document scaffolding.
"""

__version__ = "0.1.0"
