from typing import Dict, Optional
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.core.errors import DuplicateEmail, PersistenceFault, UserNotFound
from storefront.models.user import User


class CredentialStore:
    """User records: identity, email, password and the cart document."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.session.exec(select(User).where(User.email == email)).first()
        except SQLAlchemyError as exc:
            raise PersistenceFault(str(exc)) from exc

    def find_by_id(self, user_id: str) -> Optional[User]:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            raise PersistenceFault(str(exc)) from exc

    def create(self, user: User) -> User:
        if self.find_by_email(user.email):
            raise DuplicateEmail()

        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent signup for the same email
            self.session.rollback()
            raise DuplicateEmail() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFault(str(exc)) from exc
        self.session.refresh(user)
        return user

    def update_cart(self, user_id: str, cart: Dict[int, int]) -> None:
        """Replace the stored cart wholesale.

        No version check: concurrent writers for the same user overwrite
        each other and the last commit wins.
        """
        user = self.find_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)

        # Assign a new dict so the JSON column is flagged dirty
        user.cart_data = {str(item_id): quantity for item_id, quantity in cart.items()}
        self.session.add(user)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFault(str(exc)) from exc
