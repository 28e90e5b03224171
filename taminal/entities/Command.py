from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedCommand:
    """Command name plus its argument tokens, as typed on one input line."""

    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return " ".join((self.name, *self.args))
