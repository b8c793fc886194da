from pydantic import BaseModel, ConfigDict, Field, SecretStr


class Credentials(BaseModel):
    """Portal login credentials. Only ever sent in the login form."""

    model_config: ConfigDict = ConfigDict(frozen=True)

    username: str = Field(..., description="Account e-mail address")
    password: SecretStr = Field(..., description="Account password")
    remember_me: bool = Field(default=True, description="Ask for a long-lived cookie")

    def to_login_form(self) -> dict[str, str]:
        return {
            "emailAddress": self.username,
            "password": self.password.get_secret_value(),
            "rememberMe": "1" if self.remember_me else "0",
        }
