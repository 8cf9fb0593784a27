"""
Pydantic schema definitions for the catalog module.

The ``Author`` model mirrors the author documents stored in the
``authors`` collection. Only the fields used to render the author list
page are declared; extra document keys (such as MongoDB's ``_id``) are
ignored when a document is validated.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Author(BaseModel):
    """A single author entry.

    ``first_name`` may be empty; ``family_name`` is the sort key of the
    author list and must not be. Dates are stored as plain dates; the
    list page only ever shows their year.
    """

    id: Optional[str] = None
    first_name: str = ""
    family_name: str = Field(..., min_length=1)
    date_of_birth: date
    date_of_death: date
