from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    DATABASE_URL: str = "sqlite:///./storefront.db"
    SECRET_KEY: str = Field("supersecretkey_change_me_in_production", validation_alias="JWT_SECRET")
    ALGORITHM: str = "HS256"

    # Every new account starts with item ids [0, CART_SEED_SIZE) at quantity 0
    CART_SEED_SIZE: int = 300

    # Images
    UPLOAD_DIR: str = "upload/images"
    PUBLIC_BASE_URL: str = "http://localhost:4000"

    CORS_ORIGINS: List[str] = [
        "https://frontend-production-a2d3.up.railway.app",
        "https://admin-d7azyr6k5-juniors-projects-ce0eae1c.vercel.app",
    ]

    # Plain-text passwords unless explicitly switched on
    HASH_PASSWORDS: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"
    PORT: int = 4000

    @property
    def IMAGES_BASE_URL(self) -> str:
        return f"{self.PUBLIC_BASE_URL.rstrip('/')}/images"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
