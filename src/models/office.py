"""
Office and Salesperson models
"""
from typing import List
from pydantic import BaseModel, Field


class Office(BaseModel):
    """A regional office"""
    id: str
    name: str
    location: str
    # Informational only; availability is read from Salesperson
    salesperson_ids: List[str] = Field(default_factory=list)


class Salesperson(BaseModel):
    """A salesperson who can be matched to a customer chat"""
    id: str
    name: str
    title: str
    office_id: str
    available: bool = True
    quote: str = ""
