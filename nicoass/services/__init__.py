"""Services layer for nicoass.

Organized by feature:
- converter: Danmaku to ASS subtitle conversion
- loader: Comment archive (XML) loading
"""
