"""Adapters — Discord, Gemini and HTTP implementations of the ports."""
