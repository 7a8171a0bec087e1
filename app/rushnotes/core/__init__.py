"""Release notes pipeline for rushnotes.

locator -> loader -> selector -> extractor -> classifier -> renderer
"""
