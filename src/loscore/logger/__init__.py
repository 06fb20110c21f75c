"""Logging setup for loscore."""
