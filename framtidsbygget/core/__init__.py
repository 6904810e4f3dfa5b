"""Framtidsbygget core: content models and pure rules (no DB access)."""
