"""rushnotes - release notes for Rush monorepos.

Aggregates per-package CHANGELOG.json records into a single markdown
release summary grouped by conventional commit type.
"""

__version__ = "0.1.0"
