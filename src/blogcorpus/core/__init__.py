"""Core domain: post model, front matter parsing and loading."""
