"""ContextVar-based render configuration for memomark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Renderers read the active config at call time; nothing is cached on
renderer instances.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from memomark.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(indent_unit=16, indent_css_unit="px")):
        element = render_list(ListKind.UNORDERED, 2, children, renderer)
        # padding-left is 32px here

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        indent_unit: Spacing added per nesting level. Must be positive so that
            deeper lists are always indented further.
        indent_css_unit: CSS unit appended to the spacing value.
        list_base_classes: Classes every list container carries.

    """

    indent_unit: int = 6
    indent_css_unit: str = "px"
    list_base_classes: tuple[str, ...] = ("list-inside", "break-all")

    def __post_init__(self) -> None:
        if self.indent_unit <= 0:
            raise ValueError(f"indent_unit must be positive, got {self.indent_unit}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. List values for ``list_base_classes`` are
        converted to tuples.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({"indent_unit": 8, "theme": "dark"})
            >>> config.indent_unit
            8

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "list_base_classes" in filtered:
            filtered["list_base_classes"] = tuple(filtered["list_base_classes"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
