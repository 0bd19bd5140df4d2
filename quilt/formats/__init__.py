"""
Quilt file formats: hex color helpers and the saved-quilt JSON format.
"""
