"""Shared helpers for the Science Report function app."""
