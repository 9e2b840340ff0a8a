"""Typer CLI for the client."""
