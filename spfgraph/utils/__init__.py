"""Utility helpers for spfgraph."""
