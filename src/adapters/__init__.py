"""Adapters — Slack, GitHub and web implementations of the ports."""
