"""Configuration schema using Pydantic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SearchProviderName = Literal["serpapi", "serper"]


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SerpApiConfig(Base):
    """SerpAPI provider settings."""

    api_key: str = ""
    base_url: str = "https://serpapi.com/search.json"
    engine: str = "google"


class SerperConfig(Base):
    """Serper provider settings."""

    api_key: str = ""
    base_url: str = "https://google.serper.dev/search"
    num: int = 10


class SearchProvidersConfig(Base):
    serpapi: SerpApiConfig = Field(default_factory=SerpApiConfig)
    serper: SerperConfig = Field(default_factory=SerperConfig)


class SearchConfig(Base):
    """Search provider selection and call limits."""

    provider: SearchProviderName = "serpapi"
    timeout: float = 20.0
    concurrent: bool = False
    providers: SearchProvidersConfig = Field(default_factory=SearchProvidersConfig)


class NotifyConfig(Base):
    """Resend transactional email settings."""

    api_key: str = ""
    base_url: str = "https://api.resend.com/emails"
    from_address: str = ""
    to_address: str = ""
    timeout: float = 30.0


class SubscribeConfig(Base):
    """Benchmark Email contact list settings."""

    auth_token: str = ""
    list_id: str = ""
    base_url: str = "https://clientapi.benchmarkemail.com"
    timeout: float = 15.0


class SecurityConfig(Base):
    redact_secrets: bool = True


class Config(Base):
    """Root configuration for brandaudit."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    notify: NotifyConfig = Field(default_factory=NotifyConfig)
    subscribe: SubscribeConfig = Field(default_factory=SubscribeConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    def secrets(self) -> list[str]:
        """Configured credential values, for output redaction."""
        values = [
            self.search.providers.serpapi.api_key,
            self.search.providers.serper.api_key,
            self.notify.api_key,
            self.subscribe.auth_token,
        ]
        return [v for v in values if v]
