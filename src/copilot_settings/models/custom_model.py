"""Model entry for a configured chat or embedding endpoint."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomModel(BaseModel):
    """One configured model endpoint.

    Provider-specific connection parameters not listed here are kept as
    extra fields and passed through untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    name: str
    provider: str
    enabled: bool = True
    is_built_in: bool = False
    core: bool = False
    is_embedding_model: bool = False
    base_url: str | None = None
    api_key: str | None = None
    context_window: int | None = None

    @property
    def identity(self) -> tuple[str, str]:
        """Return the (name, provider) pair that identifies this entry."""
        return self.name, self.provider

    @property
    def key(self) -> str:
        """Return the persisted ``name|provider`` form of the identity."""
        return f"{self.name}|{self.provider}"
