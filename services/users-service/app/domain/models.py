# created by emeday 2025
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass
class User:
    id: str
    first_name: str
    last_name: str
    mobile_number: str
    email: str
    image: str
    password_hash: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
