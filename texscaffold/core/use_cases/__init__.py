"""
Use cases — the operations the CLI exposes, independent of click.
"""
