"""Entry point for ``python -m ghana_legal_docs``"""

from ghana_legal_docs.cli.main import app

app()
