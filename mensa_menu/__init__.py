"""Mensa menu translation and explanation service."""
