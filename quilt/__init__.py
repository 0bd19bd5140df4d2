"""
Granny Square Quilt

Generates quilts of three-ring granny squares where neighbouring squares
follow color placement rules, and renders them as images or animations.
"""
