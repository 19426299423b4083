"""Scoring and tournament engines."""
