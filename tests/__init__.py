"""
Test package for Task Tracker.

- unit/: tests for individual components (status enum, tokens, repository, service, log sanitizer)
- integrations/: HTTP tests through the FastAPI app against an in-memory store
"""
