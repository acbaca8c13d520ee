from typing import Optional
from jose import jwt, JWTError

from storefront.core.errors import InvalidToken


class TokenService:
    """Signs and verifies the stateless ``auth-token`` credential.

    The payload is ``{"user": {"id": <user id>}}`` and carries no ``exp``
    claim: a token stays valid until SECRET_KEY is rotated, which revokes
    every outstanding token at once.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def issue(self, user_id: str) -> str:
        data = {"user": {"id": user_id}}
        return jwt.encode(data, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> str:
        if not token:
            raise InvalidToken("Token missing")
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc

        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken("Token does not identify a user")
        return user_id
