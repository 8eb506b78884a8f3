"""Meeting transcript summarization and email delivery service."""
