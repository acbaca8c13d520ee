from sqlmodel import Session

from storefront.core.config import settings
from storefront.db.session import build_engine, create_db_and_tables
from storefront.services.catalog import CatalogService

SAMPLE_PRODUCTS = [
    dict(name="Striped Flutter Sleeve Blouse", category="women", new_price=50.0, old_price=80.5),
    dict(name="Pleated Midi Skirt", category="women", new_price=85.0, old_price=120.5),
    dict(name="Slim Fit Bomber Jacket", category="men", new_price=85.0, old_price=120.5),
    dict(name="Hooded Zip Sweatshirt", category="kid", new_price=60.0, old_price=100.5),
]

def seed_products(session: Session, image_base_url: str) -> int:
    """Add the sample products to an empty catalog. Returns how many were added."""
    catalog = CatalogService(session)
    existing_products = catalog.list_products()
    if existing_products:
        print(f"Database already contains {len(existing_products)} products. Skipping seed.")
        return 0

    for index, fields in enumerate(SAMPLE_PRODUCTS, start=1):
        catalog.add(image=f"{image_base_url}/product_{index}.png", **fields)
    print(f"Successfully seeded {len(SAMPLE_PRODUCTS)} products!")
    return len(SAMPLE_PRODUCTS)

if __name__ == "__main__":
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    with Session(engine) as session:
        seed_products(session, settings.IMAGES_BASE_URL)
