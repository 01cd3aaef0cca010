"""Feature configuration for chatmark.

A FeatureConfig declares which syntax a call site supports. The two call
sites of the engine only differ by the preset they pass:

    >>> from chatmark import parse, CHAT_PRESET, ANALYSIS_PRESET
    >>> parse("| a | b |\\n|---|---|", CHAT_PRESET)       # table
    >>> parse("#### Summary", ANALYSIS_PRESET)            # heading, max level 4

The active config is held in a ContextVar while a parse runs, so the
lower layers (Parser, BlockParser) read it without it being threaded through
every call.

Thread Safety:
    ContextVars are isolated per thread and per asyncio task. FeatureConfig
    is frozen, so a single preset instance can be shared freely.

Usage:
    from chatmark.config import feature_config_context, ANALYSIS_PRESET

    with feature_config_context(ANALYSIS_PRESET):
        blocks = Parser(source).parse()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Literal

from chatmark.errors import ConfigError

type HeadingDecoration = Literal["none", "diamond-for-top-two"]

_HEADING_LEVELS = (4, 6)
_DECORATIONS = ("none", "diamond-for-top-two")

# camelCase spellings used by JSON clients
_KEY_ALIASES = {
    "supportsTables": "supports_tables",
    "supportsLinks": "supports_links",
    "maxHeadingLevel": "max_heading_level",
    "headingDecoration": "heading_decoration",
}


@dataclass(frozen=True, slots=True)
class FeatureConfig:
    """Immutable syntax toggles for one call site.

    Attributes:
        supports_tables: Recognize pipe tables
        supports_links: Recognize [text](url) links
        max_heading_level: Deepest ATX heading accepted (4 or 6)
        heading_decoration: "diamond-for-top-two" marks level 1-2 headings

    """

    supports_tables: bool = False
    supports_links: bool = False
    max_heading_level: Literal[4, 6] = 6
    heading_decoration: HeadingDecoration = "none"

    def __post_init__(self) -> None:
        if self.max_heading_level not in _HEADING_LEVELS:
            raise ConfigError(
                "max_heading_level",
                f"expected one of {_HEADING_LEVELS}, got {self.max_heading_level!r}",
            )
        if self.heading_decoration not in _DECORATIONS:
            raise ConfigError(
                "heading_decoration",
                f"expected one of {_DECORATIONS}, got {self.heading_decoration!r}",
            )

    def decorates(self, level: int) -> bool:
        """Whether a heading at ``level`` gets the diamond decoration."""
        return self.heading_decoration == "diamond-for-top-two" and level <= 2

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FeatureConfig":
        """Create a FeatureConfig from a dictionary.

        Accepts snake_case field names or their camelCase spellings
        (``supportsTables``...). Unknown keys are ignored.

        Example:
            >>> FeatureConfig.from_dict({"supportsTables": True, "theme": "dark"})
            FeatureConfig(supports_tables=True, supports_links=False, ...)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _KEY_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


CHAT_PRESET = FeatureConfig(
    supports_tables=True,
    supports_links=True,
    max_heading_level=6,
    heading_decoration="none",
)

ANALYSIS_PRESET = FeatureConfig(
    supports_tables=False,
    supports_links=False,
    max_heading_level=4,
    heading_decoration="diamond-for-top-two",
)

PRESETS: dict[str, FeatureConfig] = {
    "chat": CHAT_PRESET,
    "analysis": ANALYSIS_PRESET,
}


def get_preset(name: str) -> FeatureConfig:
    """Look up a preset by name ("chat" or "analysis")."""
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigError("preset", f"unknown preset {name!r}") from None


# Default when no parse is active
_feature_config: ContextVar[FeatureConfig] = ContextVar(
    "feature_config",
    default=CHAT_PRESET,
)


def get_feature_config() -> FeatureConfig:
    """Get the active feature configuration for this context."""
    return _feature_config.get()


def set_feature_config(config: FeatureConfig) -> None:
    """Set the feature configuration for the current context."""
    _feature_config.set(config)


def reset_feature_config() -> None:
    """Reset the current context to the chat preset."""
    _feature_config.set(CHAT_PRESET)


@contextmanager
def feature_config_context(config: FeatureConfig) -> Iterator[None]:
    """Context manager for a temporary config.

    Restores the previous config on exit, including when an exception
    is raised.

    Example:
        >>> with feature_config_context(ANALYSIS_PRESET):
        ...     get_feature_config().max_heading_level
        4

    """
    token = _feature_config.set(config)
    try:
        yield
    finally:
        _feature_config.reset(token)


__all__ = [
    "ANALYSIS_PRESET",
    "CHAT_PRESET",
    "PRESETS",
    "FeatureConfig",
    "HeadingDecoration",
    "feature_config_context",
    "get_feature_config",
    "get_preset",
    "reset_feature_config",
    "set_feature_config",
]
