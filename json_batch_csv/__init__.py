"""Core logic for the JSON batch to CSV converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- read and parse a batch of JSON documents
- flatten each document into dot-path cells
- merge every document's column order into one header
- encode the rows as spreadsheet-friendly CSV
"""
