from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# Replacement key selecting the singular alternative of `!singular|plural` in a template
PLURALITY_MARKER = r"!(\S+)\|(\S+)"


@dataclass(frozen=True)
class Violation:
    attribute: str
    rule: str
    replacements: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        attribute: str,
        rule: str,
        replacements: Optional[Dict[str, Any]] = None,
        *,
        singular: bool = True,
    ) -> "Violation":
        """Seed `:attribute` and the plurality marker; explicit replacements win."""
        merged: Dict[str, Any] = {
            ":attribute": attribute,
            PLURALITY_MARKER: singular,
        }
        merged.update(replacements or {})
        return cls(attribute=attribute, rule=rule, replacements=merged)
