"""Adapters binding navsync ports to concrete infrastructure."""
