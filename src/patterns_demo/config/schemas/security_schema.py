"""Password hashing configuration schema."""
from pydantic import BaseModel, Field


class SecurityConfig(BaseModel):
    """Password hashing parameters passed to werkzeug."""

    hash_method: str = Field("scrypt", description="werkzeug password hash method")
    salt_length: int = Field(16, description="Salt length in characters")
