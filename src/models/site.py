"""
Homepage display models
"""
from pydantic import BaseModel


class Employee(BaseModel):
    """Employee roster entry"""
    name: str
    title: str
    department: str
    years_service: int
    photo: str
    quote: str


class NewsItem(BaseModel):
    """News item"""
    title: str
    content: str
    date: str
    author: str
