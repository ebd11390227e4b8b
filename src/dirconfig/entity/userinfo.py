from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

# RFC 3986 sub-delims; ':' is additionally allowed inside the password
_USERINFO_SAFE = "!$&'()*+,;="


class Userinfo(BaseModel):
    """
    Username and optional password, as stored in a JSON config entry:
        {"username": "string", "password": "string"}
    An empty password means the credential is username-only.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: Optional[str] = Field(default=None, repr=False)

    @field_validator("password")
    @classmethod
    def _empty_password_is_unset(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @property
    def password_set(self) -> bool:
        return self.password is not None

    def __str__(self) -> str:
        """Percent-encoded user[:password], as written in a URL authority."""
        s = quote(self.username, safe=_USERINFO_SAFE)
        if self.password is not None:
            s += ":" + quote(self.password, safe=_USERINFO_SAFE + ":")
        return s
