"""
Greeting schema
"""

from sqlmodel import SQLModel


class HelloRead(SQLModel):
    """Schema for the greeting payload"""

    message: str
