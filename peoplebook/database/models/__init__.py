# peoplebook/database/models/__init__.py

from peoplebook.database.core.main import Base
from peoplebook.database.models.person import Person

__all__ = [
    "Base",
    "Person",
]
