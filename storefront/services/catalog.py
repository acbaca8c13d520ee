from typing import List, Optional
from sqlmodel import Session, select, func
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.errors import PersistenceFault
from storefront.core.logging import get_logger
from storefront.models.product import Product

logger = get_logger(__name__)


class CatalogService:
    def __init__(self, session: Session):
        self.session = session

    def list_products(self) -> List[Product]:
        try:
            return list(self.session.exec(select(Product).order_by(Product.id)).all())
        except SQLAlchemyError as exc:
            raise PersistenceFault(str(exc)) from exc

    def filter_by_category(self, category: str) -> List[Product]:
        try:
            return list(self.session.exec(
                select(Product).where(Product.category == category).order_by(Product.id)
            ).all())
        except SQLAlchemyError as exc:
            raise PersistenceFault(str(exc)) from exc

    def next_id(self) -> int:
        """Highest identifier in the catalog plus one, or 1 when empty.

        Deleting the newest product frees its identifier for the next add;
        any other deleted identifier is never handed out again.
        """
        current_max: Optional[int] = self.session.exec(select(func.max(Product.id))).one()
        return (current_max or 0) + 1

    def add(
        self,
        name: str,
        image: str,
        category: str,
        new_price: float,
        old_price: float,
        available: bool = True,
    ) -> Product:
        try:
            product = Product(
                id=self.next_id(),
                name=name,
                image=image,
                category=category,
                new_price=new_price,
                old_price=old_price,
                available=available,
            )
            self.session.add(product)
            self.session.commit()
            self.session.refresh(product)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFault(str(exc)) from exc
        logger.info("catalog.add", product_id=product.id, name=product.name)
        return product

    def remove(self, product_id: int) -> None:
        try:
            product = self.session.get(Product, product_id)
            if product is None:
                return
            self.session.delete(product)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFault(str(exc)) from exc
        logger.info("catalog.remove", product_id=product_id)

    def new_collections(self, limit: int = 8) -> List[Product]:
        """Newest ``limit`` products, never including the very first one."""
        return self.list_products()[1:][-limit:]

    def popular_in(self, category: str = "women", limit: int = 4) -> List[Product]:
        return self.filter_by_category(category)[:limit]
