from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class StackKind(Enum):
    INT = "int"
    STRING = "string"
    POINT = "point"


def parse_kind(name: str) -> Optional[StackKind]:
    try:
        return StackKind((name or "").strip().lower())
    except ValueError:
        return None


@dataclass
class Point:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> Optional["Point"]:
        """
        "x,y" 形式（空白可）を Point にする。不正なら None
        """
        parts = [p.strip() for p in (text or "").split(",")]
        if len(parts) != 2:
            return None
        try:
            return cls(x=int(parts[0]), y=int(parts[1]))
        except ValueError:
            return None


@dataclass
class UndoOp:
    """
    直前操作を取り消すための記録
    """
    op_type: str        # "PUSH" / "POP"
    kind: StackKind
    value: Any
