"""Conversation scripts and message templates."""
