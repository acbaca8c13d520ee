from typing import Optional
from uuid import uuid4
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from datetime import datetime, timezone

def new_user_id() -> str:
    return uuid4().hex

class User(SQLModel, table=True):
    id: str = Field(default_factory=new_user_id, primary_key=True)

    # Basic Info
    name: Optional[str] = None
    email: str = Field(unique=True, index=True)
    # Stored exactly as produced by PasswordPolicy.prepare (plain text unless HASH_PASSWORDS)
    password: str

    # Cart stored as {"<item id>": quantity}; JSON object keys are always strings
    cart_data: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
