from pydantic import BaseModel
from typing import Optional

class ContactIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

class ContactOut(BaseModel):
    message: str
