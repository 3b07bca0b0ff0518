"""
Boundary layer for external system integrations.

Handles all interactions with external systems: the SQLite chunk table,
the vector store built on it, and the embedding and chat-completion
providers reached over HTTP.
"""
