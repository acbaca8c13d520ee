from datetime import datetime, timezone
from sqlmodel import Field, SQLModel

class Product(SQLModel, table=True):
    # Assigned by CatalogService as max(existing) + 1, never by the database
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})

    # Basic Info
    name: str = Field(index=True)
    image: str
    category: str = Field(index=True)

    # Pricing
    new_price: float
    old_price: float

    # Metadata
    available: bool = Field(default=True)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
