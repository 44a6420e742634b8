"""
Core — models, configuration, generators and use cases.

Nothing in here talks to the terminal; the CLI layer lives in ``texscaffold.ui``.
"""
