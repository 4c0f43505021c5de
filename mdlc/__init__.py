"""mdlc - Markdown link checker."""
