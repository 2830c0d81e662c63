"""
HEALense chat backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, use cases for sessions, rooms, messages and images, and the
infrastructure (MongoDB repositories, streaming language-model client).
"""
