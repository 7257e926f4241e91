"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Keeps the retry loop independent of the HTTP client.
"""
