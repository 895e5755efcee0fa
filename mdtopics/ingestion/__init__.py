"""Markdown parsing, path encoding and publishing."""
