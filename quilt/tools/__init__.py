"""
Granny Square Quilt - Command-line tools.
"""
