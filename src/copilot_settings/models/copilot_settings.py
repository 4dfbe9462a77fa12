"""Settings value model for copilot_settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from copilot_settings.models.custom_model import CustomModel

ChainType = Literal["llm_chain", "vault_qa", "copilot_plus"]
DefaultOpenArea = Literal["editor", "view"]


class EnabledCommand(BaseModel):
    """Enabled flag and display name of one editor command."""

    model_config = ConfigDict(frozen=True)

    enabled: bool
    name: str


class CopilotSettings(BaseModel):
    """The full settings value held by the store.

    Instances are frozen. Nested lists and dicts are shared with whoever
    holds the value and must not be mutated in place; build a new value
    through ``SettingsStore.set`` instead.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    plus_license_key: str = ""
    # Persisted keys keep the host's "OpenAI" spelling.
    openai_api_key: str = Field(default="", alias="openAIApiKey")
    openai_org_id: str = Field(default="", alias="openAIOrgId")
    huggingface_api_key: str = ""
    cohere_api_key: str = ""
    anthropic_api_key: str = ""
    azure_openai_api_key: str = Field(default="", alias="azureOpenAIApiKey")
    azure_openai_api_instance_name: str = Field(default="", alias="azureOpenAIApiInstanceName")
    azure_openai_api_deployment_name: str = Field(
        default="", alias="azureOpenAIApiDeploymentName"
    )
    azure_openai_api_version: str = Field(default="", alias="azureOpenAIApiVersion")
    azure_openai_api_embedding_deployment_name: str = Field(
        default="", alias="azureOpenAIApiEmbeddingDeploymentName"
    )
    google_api_key: str = ""
    openrouter_ai_api_key: str = Field(default="", alias="openRouterAiApiKey")
    groq_api_key: str = ""
    default_chain_type: ChainType = "llm_chain"
    default_model_key: str = "gpt-4o|openai"
    embedding_model_key: str = "text-embedding-3-small|openai"
    temperature: float = 0.1
    max_tokens: int = 1000
    context_turns: int = 15
    # Read through get_system_prompt(), which applies the default.
    user_system_prompt: str = ""
    openai_proxy_base_url: str = Field(default="", alias="openAIProxyBaseUrl")
    openai_embedding_proxy_base_url: str = Field(
        default="", alias="openAIEmbeddingProxyBaseUrl"
    )
    stream: bool = True
    default_save_folder: str = "copilot-conversations"
    default_conversation_tag: str = "ai-conversations"
    autosave_chat: bool = False
    custom_prompts_folder: str = "copilot-custom-prompts"
    index_vault_to_vector_store: str = "ON MODE SWITCH"
    chat_note_context_path: str = ""
    chat_note_context_tags: list[str] = Field(default_factory=list)
    debug: bool = False
    enable_encryption: bool = False
    max_source_chunks: int = 3
    qa_exclusions: str = ""
    qa_inclusions: str = ""
    enabled_commands: dict[str, EnabledCommand] = Field(default_factory=dict)
    active_models: list[CustomModel] = Field(default_factory=list)
    active_embedding_models: list[CustomModel] = Field(default_factory=list)
    prompt_usage_timestamps: dict[str, int] = Field(default_factory=dict)
    embedding_requests_per_second: int = 10
    default_open_area: DefaultOpenArea = "view"
    disable_index_on_mobile: bool = True
    show_suggested_prompts: bool = True

    @classmethod
    def alias_for(cls, name: str) -> str:
        """Return the persisted camelCase key of a field."""
        return cls.model_fields[name].alias or to_camel(name)

    @classmethod
    def field_name(cls, key: str) -> str | None:
        """Map a field name or its camelCase alias to the field name."""
        if key in cls.model_fields:
            return key
        for name in cls.model_fields:
            if cls.alias_for(name) == key:
                return name
        return None
