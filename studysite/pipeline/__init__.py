"""Headless rendering pipeline for the study site."""
