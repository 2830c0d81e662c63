"""
API layer for the chat backend.

Exposes the HTTP endpoints under /api (registration, sessions, rooms, images,
messages and the streaming chat turn) plus the per-route CORS middleware.
"""
