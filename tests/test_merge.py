"""Unit tests for copilot_settings.merge."""

from copilot_settings.constants import BUILTIN_CHAT_MODELS, BUILTIN_EMBEDDING_MODELS
from copilot_settings.merge import (
    merge_active_models,
    merge_all_active_models_with_core_models,
)
from copilot_settings.models import CopilotSettings, CustomModel


def make_model(name, provider="openai", **fields):
    return CustomModel(name=name, provider=provider, **fields)


CORE_A = make_model("core-a", core=True, is_built_in=True)
CORE_B = make_model("core-b", provider="anthropic", core=True, is_built_in=True)
OPTIONAL = make_model("optional", provider="google", is_built_in=True)
CATALOG = [CORE_A, OPTIONAL, CORE_B]


def identities(models):
    return [model.identity for model in models]


# ---------------------------------------------------------------------------
# merge_active_models() — worked example
# ---------------------------------------------------------------------------


class TestMergeExample:
    def test_user_copy_of_core_model_becomes_core_and_built_in(self):
        existing = [
            make_model("gpt-x", provider="openai", core=False, is_built_in=False, enabled=True)
        ]
        built_in = [make_model("gpt-x", provider="openai", core=True, is_built_in=True)]

        merged = merge_active_models(existing, built_in)

        assert merged == [
            make_model("gpt-x", provider="openai", core=True, is_built_in=True, enabled=True)
        ]


# ---------------------------------------------------------------------------
# merge_active_models() — core built-ins
# ---------------------------------------------------------------------------


class TestCoreModels:
    def test_core_models_added_when_user_list_is_empty(self):
        merged = merge_active_models([], CATALOG)
        assert identities(merged) == [CORE_A.identity, CORE_B.identity]

    def test_non_core_built_ins_are_not_added(self):
        merged = merge_active_models([], CATALOG)
        assert OPTIONAL.identity not in identities(merged)

    def test_core_flag_forced_on_catalog_copy(self):
        catalog = [make_model("m", core=True)]
        merged = merge_active_models([], catalog)
        assert merged[0].core is True

    def test_core_stays_true_when_user_entry_says_false(self):
        existing = [make_model("core-a", core=False, is_built_in=True)]
        merged = merge_active_models(existing, CATALOG)
        assert merged[0].identity == CORE_A.identity
        assert merged[0].core is True

    def test_user_fields_win_for_core_identity(self):
        existing = [make_model("core-a", enabled=False, base_url="http://proxy")]
        merged = merge_active_models(existing, CATALOG)
        assert merged[0].enabled is False
        assert merged[0].base_url == "http://proxy"

    def test_core_models_come_first_in_catalog_order(self):
        existing = [
            make_model("mine"),
            make_model("core-b", provider="anthropic"),
            make_model("core-a"),
        ]
        merged = merge_active_models(existing, CATALOG)
        assert identities(merged) == [
            CORE_A.identity,
            CORE_B.identity,
            ("mine", "openai"),
        ]


# ---------------------------------------------------------------------------
# merge_active_models() — user entries
# ---------------------------------------------------------------------------


class TestUserModels:
    def test_non_core_built_in_kept_as_is(self):
        existing = [make_model("optional", provider="google", is_built_in=True, enabled=False)]
        merged = merge_active_models(existing, CATALOG)
        assert merged[-1] == existing[0]
        assert merged[-1].core is False

    def test_user_models_keep_original_order(self):
        existing = [make_model("z"), make_model("a"), make_model("m")]
        merged = merge_active_models(existing, CATALOG)
        assert identities(merged)[2:] == [("z", "openai"), ("a", "openai"), ("m", "openai")]

    def test_same_name_different_provider_are_distinct(self):
        existing = [make_model("llama", provider="ollama"), make_model("llama", provider="groq")]
        merged = merge_active_models(existing, [])
        assert len(merged) == 2

    def test_duplicates_collapse_at_first_position(self):
        existing = [
            make_model("dup", enabled=True),
            make_model("other"),
            make_model("dup", enabled=False),
        ]
        merged = merge_active_models(existing, [])
        assert identities(merged) == [("dup", "openai"), ("other", "openai")]
        assert merged[0].enabled is False

    def test_duplicate_keeps_built_in_flag(self):
        existing = [make_model("dup", is_built_in=True), make_model("dup", is_built_in=False)]
        merged = merge_active_models(existing, [])
        assert merged[0].is_built_in is True

    def test_extra_connection_fields_pass_through(self):
        existing = [CustomModel(name="local", provider="ollama", ollamaKeepAlive="5m")]
        merged = merge_active_models(existing, CATALOG)
        assert merged[-1].model_extra == {"ollamaKeepAlive": "5m"}

    def test_inputs_are_not_modified(self):
        existing = [make_model("core-a", core=False)]
        merge_active_models(existing, CATALOG)
        assert existing[0].core is False


# ---------------------------------------------------------------------------
# merge_active_models() — properties
# ---------------------------------------------------------------------------


class TestMergeProperties:
    EXISTING = [
        make_model("core-a", is_built_in=False, enabled=False),
        make_model("mine"),
        make_model("optional", provider="google"),
        make_model("mine", base_url="http://x"),
        make_model("core-b", provider="anthropic", core=False),
    ]

    def test_identities_are_unique(self):
        merged = merge_active_models(self.EXISTING, CATALOG)
        assert len(identities(merged)) == len(set(identities(merged)))

    def test_every_core_built_in_present_and_core(self):
        merged = {model.identity: model for model in merge_active_models(self.EXISTING, CATALOG)}
        for built_in in CATALOG:
            if built_in.core:
                assert merged[built_in.identity].core is True

    def test_built_in_flag_is_monotonic(self):
        existing = [make_model("core-a", is_built_in=False), make_model("mine", is_built_in=True)]
        merged = {model.identity: model for model in merge_active_models(existing, CATALOG)}
        assert merged[CORE_A.identity].is_built_in is True
        assert merged[("mine", "openai")].is_built_in is True

    def test_merge_is_idempotent(self):
        once = merge_active_models(self.EXISTING, CATALOG)
        twice = merge_active_models(once, CATALOG)
        assert twice == once

    def test_idempotent_on_shipped_catalogs(self):
        for catalog in (BUILTIN_CHAT_MODELS, BUILTIN_EMBEDDING_MODELS):
            once = merge_active_models(list(catalog), catalog)
            assert merge_active_models(once, catalog) == once


# ---------------------------------------------------------------------------
# merge_all_active_models_with_core_models()
# ---------------------------------------------------------------------------


class TestMergeAll:
    def test_merges_both_lists_with_their_catalogs(self):
        settings = CopilotSettings(active_models=[], active_embedding_models=[])
        chat = [make_model("chat", core=True)]
        embedding = [make_model("embed", core=True, is_embedding_model=True)]

        merged = merge_all_active_models_with_core_models(settings, chat, embedding)

        assert identities(merged.active_models) == [("chat", "openai")]
        assert identities(merged.active_embedding_models) == [("embed", "openai")]

    def test_returns_new_value(self):
        settings = CopilotSettings(temperature=0.5)
        merged = merge_all_active_models_with_core_models(settings, CATALOG, [])
        assert merged is not settings
        assert settings.active_models == []
        assert merged.temperature == 0.5
