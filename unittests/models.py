"""
Objects to validate in the tests
"""
from typing import Optional

from pydantic import BaseModel


class Address(BaseModel):
    city: Optional[str] = None
    zip_code: Optional[str] = None


class Order(BaseModel):
    id: Optional[int] = None
    status: Optional[str] = None
    currency: Optional[str] = None
    address: Optional[Address] = None


class Broken:
    """an object whose attribute access fails"""

    @property
    def status(self) -> str:
        raise KeyError("status is not loaded")
