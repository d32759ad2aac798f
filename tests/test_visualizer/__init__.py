"""
Front End Tests

Tests for the interactive console and the HTTP API.
"""
