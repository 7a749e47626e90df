"""Core logic for the JSON Field Builder.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- model an ordered tree of typed fields
- edit that tree by index path, returning a new tree each time
- derive a sample JSON document from the tree
"""
