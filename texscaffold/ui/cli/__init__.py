"""
CLI helpers — interactive prompts used by ``texscaffold.main``.
"""
