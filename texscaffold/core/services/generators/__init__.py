"""
Generators — produce file content from an answer set.

The document generator returns a ``GeneratedFile``; the editor config
generator reads and writes ``settings.json`` itself because it has to
merge with what is already on disk.
"""
