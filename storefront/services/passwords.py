from passlib.context import CryptContext
from passlib.exc import UnknownHashError

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordPolicy:
    """How passwords are stored and compared.

    With ``hashing`` off (the default) the password is kept as given and
    login compares it verbatim. Turning HASH_PASSWORDS on stores argon2
    hashes instead; accounts created before the switch can no longer log in.
    """

    def __init__(self, hashing: bool = False):
        self.hashing = hashing

    def prepare(self, password: str) -> str:
        if self.hashing:
            return pwd_context.hash(password)
        return password

    def matches(self, plain_password: str, stored_password: str) -> bool:
        if not self.hashing:
            return plain_password == stored_password
        try:
            return pwd_context.verify(plain_password, stored_password)
        except (UnknownHashError, ValueError):
            # Stored value is not an argon2 hash
            return False
