"""
Pydantic schema definitions for API payloads and directory records.

Request models (``*Create``, ``*Update``) describe what clients send;
record models (``*Read``) are what the directory stores and what the
API returns.
"""
