from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from generic_stack.stack import Stack
from generic_stack.models import Point, StackKind, UndoOp

logger = logging.getLogger(__name__)


class StackPlayground:
    """
    3種類の型付きスタックを操作するプレイグラウンド

    - int / string / Point: Stack（LIFO）
    - Undo: Stack（LIFO）
    """

    def __init__(self) -> None:
        self.int_stack: Stack[int] = Stack()
        self.string_stack: Stack[str] = Stack()
        self.point_stack: Stack[Point] = Stack()

        # Undo Stack
        self.undo_stack: Stack[UndoOp] = Stack()

    # -------------------------
    # 初期化
    # -------------------------
    def reset(self) -> None:
        self.int_stack = Stack()
        self.string_stack = Stack()
        self.point_stack = Stack()
        self.undo_stack = Stack()
        logger.info("playground reset")

    # -------------------------
    # 表示用
    # -------------------------
    def get_stack(self, kind: StackKind) -> Stack[Any]:
        if kind == StackKind.INT:
            return self.int_stack
        if kind == StackKind.STRING:
            return self.string_stack
        return self.point_stack

    def get_overview(self) -> dict[str, dict[str, Any]]:
        overview: dict[str, dict[str, Any]] = {}
        for kind in StackKind:
            stack = self.get_stack(kind)
            overview[kind.value] = {
                "size": stack.size(),
                "top": stack.peek(),
                "dump": stack.dump(),
            }
        return overview

    def get_undo_size(self) -> int:
        return self.undo_stack.size()

    # -------------------------
    # push / pop / peek
    # -------------------------
    def push(self, kind: StackKind, raw: str) -> Tuple[bool, str]:
        value = self._parse_value(kind, raw)
        if value is None:
            logger.warning("rejected %s input: %r", kind.value, raw)
            return False, f"{kind.value} として解釈できない入力です：{raw!r}"

        self.get_stack(kind).push(value)

        # Undo記録（pushを取り消す）
        self.undo_stack.push(UndoOp(op_type="PUSH", kind=kind, value=value))
        logger.info("push %s %r", kind.value, value)
        return True, f"push しました：{value!r}"

    def pop(self, kind: StackKind) -> Tuple[bool, str]:
        value = self.get_stack(kind).pop()
        if value is None:
            return False, f"{kind.value} スタックは空です"

        # Undo記録（popを取り消す）
        self.undo_stack.push(UndoOp(op_type="POP", kind=kind, value=value))
        logger.info("pop %s %r", kind.value, value)
        return True, f"pop しました：{value!r}"

    def peek(self, kind: StackKind) -> Tuple[bool, str]:
        stack = self.get_stack(kind)
        top = stack.peek()
        if top is None:
            return False, f"{kind.value} スタックは空です"
        return True, f"先頭：{top!r}（要素数 {stack.size()}）"

    # -------------------------
    # Undo（直前1操作だけ取り消す）
    # -------------------------
    def undo_last(self) -> Tuple[bool, str]:
        op = self.undo_stack.pop()
        if op is None:
            return False, "Undoできる操作がありません"

        stack = self.get_stack(op.kind)

        # ---- push の取り消し ----
        if op.op_type == "PUSH":
            if stack.peek() != op.value:
                return False, "先頭が一致しないためUndoできません"
            stack.pop()
            logger.info("undo push %s %r", op.kind.value, op.value)
            return True, f"Undo: push を取り消しました（{op.value!r}）"

        # ---- pop の取り消し ----
        if op.op_type == "POP":
            stack.push(op.value)
            logger.info("undo pop %s %r", op.kind.value, op.value)
            return True, f"Undo: pop を取り消しました（{op.value!r}）"

        return False, "未対応のUndo操作です"

    # -------------------------
    # 内部
    # -------------------------
    def _parse_value(self, kind: StackKind, raw: str) -> Optional[Any]:
        text = (raw or "").strip()
        if kind == StackKind.INT:
            try:
                return int(text)
            except ValueError:
                return None
        if kind == StackKind.STRING:
            return text or None
        return Point.parse(text)
