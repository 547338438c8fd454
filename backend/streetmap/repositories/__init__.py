# Repositories package init
"""
StreetMap Backend — Repository Layer
======================================

What:  Data access sitting between routes (HTTP) and the database.
How:   Each repository is built per request around an AsyncSession and the
       storage timeout (see streetmap.dependencies). It raises application
       exceptions; it never builds HTTP responses.

Repository Inventory:
    - StreetRepository: list_streets, create_street, update_color, delete_street
    - LineRepository:   list_lines, create_line, delete_line
"""

from streetmap.repositories.line_repository import LineRepository
from streetmap.repositories.street_repository import StreetRepository

__all__ = ["LineRepository", "StreetRepository"]
