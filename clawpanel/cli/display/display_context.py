"""Display factory."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .Display import Display


@dataclass(frozen=True)
class DisplayContext:
    """Maps display modes to factories; a GUI front end can register its own."""

    factories: Mapping[str, Callable[[], Display]] = field(
        default_factory=lambda: MappingProxyType(DisplayContext._build_factories())
    )

    def __post_init__(self) -> None:
        if "cli" not in self.factories:
            raise ValueError("Display factories missing required mode: 'cli'")

    @staticmethod
    def _build_factories() -> dict[str, Callable[[], Display]]:
        from .CLIDisplay import CLIDisplay

        return {"cli": CLIDisplay}

    def get_display(self, mode: str = "cli") -> Display:
        """Get display implementation for ``mode``."""
        factory = self.factories.get(mode)
        if factory is None:
            raise ValueError(f"Unsupported display mode: {mode}")
        return factory()


display_context = DisplayContext()
