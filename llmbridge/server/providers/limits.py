"""Token limit heuristics for OpenAI-family model identifiers.

Each table is an ordered sequence of ``(predicate, value)`` rules. The first
rule whose predicate accepts the identifier wins; identifiers no rule accepts
get the table's default.
"""

from collections.abc import Callable, Sequence

Rule = tuple[Callable[[str], bool], int]

# Hard ceiling applied to every reported or inferred context window
MAX_CONTEXT_TOKENS = 128000

DEFAULT_CONTEXT_WINDOW = 32000
DEFAULT_COMPLETION_TOKENS = 4096


def _contains(*fragments: str) -> Callable[[str], bool]:
    return lambda model_id: any(fragment in model_id for fragment in fragments)


def _startswith(prefix: str) -> Callable[[str], bool]:
    return lambda model_id: model_id.startswith(prefix)


CONTEXT_WINDOW_RULES: tuple[Rule, ...] = (
    (_contains("gpt-4o"), 128000),
    (_contains("gpt-4-turbo", "gpt-4-1106"), 128000),
    (_contains("gpt-4"), 8192),
    (_contains("gpt-3.5-turbo"), 16385),
)

COMPLETION_TOKEN_RULES: tuple[Rule, ...] = (
    (_startswith("o1-preview"), 32000),
    (_startswith("o1-mini"), 65000),
    (_startswith("o1"), 32000),
    (_contains("o3", "o4"), 100000),
    (_contains("gpt-4o"), 4096),
    (_contains("gpt-4"), 8192),
    (_contains("gpt-3.5-turbo"), 4096),
)


def first_match(model_id: str, rules: Sequence[Rule], default: int) -> int:
    """Return the value of the first rule accepting ``model_id``, else ``default``."""
    for predicate, value in rules:
        if predicate(model_id):
            return value
    return default


def context_window_for(model_id: str, reported: int | None = None) -> int:
    """Context window for a model, uncapped.

    A positive ``reported`` window (the listing's ``context_length``) is used
    as-is; otherwise the identifier is matched against CONTEXT_WINDOW_RULES.
    """
    if reported and reported > 0:
        return reported
    return first_match(model_id, CONTEXT_WINDOW_RULES, DEFAULT_CONTEXT_WINDOW)


def completion_tokens_for(model_id: str) -> int:
    return first_match(model_id, COMPLETION_TOKEN_RULES, DEFAULT_COMPLETION_TOKENS)
