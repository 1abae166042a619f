"""Typed async client for the Last.fm web service."""
