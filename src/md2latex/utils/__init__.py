#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Internal helpers shared by the md2latex parser, renderer and CLI."""
