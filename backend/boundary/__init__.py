"""
Boundary layer for external system integrations.

Handles all interactions with external systems: the relational database
and the Amap and Steam HTTP APIs. LLM vendors live in backend.core.ai.
"""
