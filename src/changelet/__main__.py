"""Allow running changelet as ``python -m changelet``."""

from .cli import app

app()
