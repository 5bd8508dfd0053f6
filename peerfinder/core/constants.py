"""
Core constants used across the application. Keep these simple and documented.
"""

# Leading marker rendered in front of every category display name
CATEGORY_MARKER: str = "#"
# Separator used when rendering the primary categories header
CATEGORY_LABEL_SEPARATOR: str = ", "
