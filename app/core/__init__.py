"""
Core functionality for the URL content summarization application.

This package contains modules for classifying URLs, extracting their
content, chunking text, and summarizing it.
"""
