"""Configuration package for the fantasy football advisor."""
