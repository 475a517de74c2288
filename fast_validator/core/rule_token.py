from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

RuleDeclaration = Union[str, "RuleToken"]
RuleDeclarations = Union[str, Sequence[RuleDeclaration]]


@dataclass(frozen=True)
class RuleToken:
    """A rule name plus its ordered string parameters, e.g. `between:1,5`."""

    name: str
    parameters: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, declaration: str) -> "RuleToken":
        name, sep, blob = declaration.partition(":")
        if not sep:
            return cls(name.strip())
        return cls(name.strip(), tuple(param.strip() for param in blob.split(",")))

    def __str__(self) -> str:
        if not self.parameters:
            return self.name
        return f"{self.name}:{','.join(self.parameters)}"


def parse_rules(declarations: RuleDeclarations) -> List[RuleToken]:
    """Normalize `"required|in:a,b"` or `["required", RuleToken(...)]` into tokens."""
    if isinstance(declarations, str):
        items: Iterable[RuleDeclaration] = declarations.split("|")
    else:
        items = declarations

    tokens: List[RuleToken] = []
    for item in items:
        tokens.append(item if isinstance(item, RuleToken) else RuleToken.parse(str(item)))
    return tokens
