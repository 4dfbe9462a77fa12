"""Built-in catalogs and default values for copilot_settings."""

from copilot_settings.models import CopilotSettings, CustomModel, EnabledCommand

BOLD = "\033[1m"
CYAN = "\033[36m"
DIM = "\033[2m"
RESET = "\033[0m"

DEFAULT_SYSTEM_PROMPT = """\
You are Obsidian Copilot, a helpful assistant that integrates AI to Obsidian note-taking.
  1. Never mention that you do not have access to something. Always rely on the user provided context.
  2. Always answer to the best of your knowledge. If you are unsure about something, say so and ask the user to provide more context.
  3. If the user mentions "note", it most likely means an Obsidian note in the vault, not the generic meaning of a note.
  4. If the user mentions "@vault", it means the user wants you to search the Obsidian vault. The search results will be provided to you in the context. If there's no relevant information in the vault, just say so.
  5. If the user mentions any other tool with the @ symbol, check the context for their results. If nothing is found, just ignore the @ symbol in the query.
  6. Always use $'s instead of \\[ etc. for LaTeX equations.
  7. When showing note titles, use [[title]] format and do not wrap them in ` `.
  8. When showing **Obsidian internal** image links, use ![[link]] format and do not wrap them in ` `.
  9. When showing **web** image links, use ![link](url) format and do not wrap them in ` `.
  10. Always respond in the language of the user's query.
  11. Do NOT mention the additional context provided such as getCurrentTime and getTimeRangeMs if it's irrelevant to the user message."""

# Built-in chat models, in the order the host lists them. Core entries are
# always present in the active list; the rest are opt-in.
BUILTIN_CHAT_MODELS: tuple[CustomModel, ...] = (
    CustomModel(
        name="gpt-4o",
        provider="openai",
        enabled=True,
        is_built_in=True,
        core=True,
    ),
    CustomModel(
        name="gpt-4o-mini",
        provider="openai",
        enabled=True,
        is_built_in=True,
        core=True,
    ),
    CustomModel(
        name="claude-3-5-sonnet-latest",
        provider="anthropic",
        enabled=True,
        is_built_in=True,
    ),
    CustomModel(
        name="claude-3-5-haiku-latest",
        provider="anthropic",
        enabled=True,
        is_built_in=True,
    ),
    CustomModel(
        name="command-r",
        provider="cohereai",
        enabled=False,
        is_built_in=True,
    ),
    CustomModel(
        name="gemini-1.5-pro",
        provider="google",
        enabled=True,
        is_built_in=True,
    ),
    CustomModel(
        name="gemini-1.5-flash",
        provider="google",
        enabled=True,
        is_built_in=True,
    ),
    CustomModel(
        name="llama3-70b-8192",
        provider="groq",
        enabled=False,
        is_built_in=True,
    ),
)

BUILTIN_EMBEDDING_MODELS: tuple[CustomModel, ...] = (
    CustomModel(
        name="text-embedding-3-small",
        provider="openai",
        enabled=True,
        is_built_in=True,
        is_embedding_model=True,
        core=True,
    ),
    CustomModel(
        name="text-embedding-3-large",
        provider="openai",
        enabled=True,
        is_built_in=True,
        is_embedding_model=True,
    ),
    CustomModel(
        name="embed-multilingual-light-v3.0",
        provider="cohereai",
        enabled=True,
        is_built_in=True,
        is_embedding_model=True,
    ),
    CustomModel(
        name="text-embedding-004",
        provider="google",
        enabled=True,
        is_built_in=True,
        is_embedding_model=True,
    ),
)

DEFAULT_ENABLED_COMMANDS: dict[str, EnabledCommand] = {
    "fix-grammar": EnabledCommand(enabled=True, name="Fix grammar and spelling of selection"),
    "summarize": EnabledCommand(enabled=True, name="Summarize selection"),
    "generate-toc": EnabledCommand(enabled=True, name="Generate table of contents for selection"),
    "generate-glossary": EnabledCommand(enabled=True, name="Generate glossary for selection"),
    "simplify": EnabledCommand(enabled=True, name="Simplify selection"),
    "emojify": EnabledCommand(enabled=True, name="Emojify selection"),
    "remove-urls": EnabledCommand(enabled=True, name="Remove URLs from selection"),
    "rewrite-tweet": EnabledCommand(enabled=True, name="Rewrite selection to a tweet"),
    "make-longer": EnabledCommand(enabled=True, name="Make selection longer"),
    "make-shorter": EnabledCommand(enabled=True, name="Make selection shorter"),
    "eli5": EnabledCommand(enabled=True, name="Explain selection like I'm 5"),
    "press-release": EnabledCommand(enabled=True, name="Rewrite selection to a press release"),
}

DEFAULT_SETTINGS = CopilotSettings(
    enabled_commands=DEFAULT_ENABLED_COMMANDS,
    active_models=list(BUILTIN_CHAT_MODELS),
    active_embedding_models=list(BUILTIN_EMBEDDING_MODELS),
)
