"""Allow running as ``python -m rushnotes``."""

from rushnotes.cli.main import app

app()
