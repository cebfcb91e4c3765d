"""
Shared utilities: LLM HTTP clients.
"""
