"""
Services — document and editor-config generation.
"""
