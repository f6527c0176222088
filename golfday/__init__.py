"""Scoring and standings engine for club golf tournaments."""
