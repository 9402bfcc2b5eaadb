"""Adapters implementing vcstamp's ports."""
