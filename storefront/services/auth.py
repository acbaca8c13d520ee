from storefront.core.errors import InvalidCredentials
from storefront.core.logging import get_logger
from storefront.models.user import User
from storefront.services.cart import seed_cart
from storefront.services.credentials import CredentialStore
from storefront.services.passwords import PasswordPolicy
from storefront.services.tokens import TokenService

logger = get_logger(__name__)


class AuthService:
    def __init__(
        self,
        store: CredentialStore,
        tokens: TokenService,
        passwords: PasswordPolicy,
        cart_seed_size: int = 300,
    ):
        self.store = store
        self.tokens = tokens
        self.passwords = passwords
        self.cart_seed_size = cart_seed_size

    def register_user(self, username: str, email: str, password: str) -> User:
        cart = seed_cart(self.cart_seed_size)
        user = User(
            name=username,
            email=email,
            password=self.passwords.prepare(password),
            cart_data={str(item_id): quantity for item_id, quantity in cart.items()},
        )
        return self.store.create(user)

    def signup(self, username: str, email: str, password: str) -> str:
        """Create the account and return a token for it."""
        user = self.register_user(username, email, password)
        logger.info("auth.signup", user_id=user.id)
        return self.tokens.issue(user.id)

    def login(self, email: str, password: str) -> str:
        user = self.store.find_by_email(email)
        if not user:
            logger.info("auth.login_rejected", reason="unknown_email")
            raise InvalidCredentials("Wrong Email Id")
        if not self.passwords.matches(password, user.password):
            logger.info("auth.login_rejected", reason="wrong_password", user_id=user.id)
            raise InvalidCredentials("Wrong Password")
        logger.info("auth.login", user_id=user.id)
        return self.tokens.issue(user.id)
