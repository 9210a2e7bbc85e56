"""Rideshare driver earnings dashboard."""
