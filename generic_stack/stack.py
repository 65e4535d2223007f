from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar, List

from generic_stack.errors import StaleViewError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Stack(Generic[T]):
    """
    Stack（LIFO）
    push: O(1) amortized
    pop : O(1)

    push で受け取った値はスタックが所有する（呼び出し側は以後使わない約束）。
    pop で返した値の所有権は呼び出し側に戻る。
    容量の上限はない（メモリが尽きるまで伸びる）。
    """

    def __init__(self) -> None:
        self._data: List[T] = []
        # push / pop が成功するたびに進む。TopView の失効判定用
        self._version: int = 0

    @classmethod
    def new(cls) -> "Stack[T]":
        return cls()

    def push(self, item: T) -> None:
        self._data.append(item)
        self._version += 1

    def pop(self) -> Optional[T]:
        if not self._data:
            return None
        self._version += 1
        return self._data.pop()

    def peek(self) -> Optional[T]:
        """
        先頭要素そのもの（コピーではない）を返す。

        ※ エイリアスの危険：返り値はスタック内のオブジェクトと同一。
          書き換えないこと、次の push / pop 以降は先頭である保証がないこと。
          実行時チェックが欲しい場合は peek_view() を使う。
        """
        if not self._data:
            return None
        return self._data[-1]

    def peek_view(self) -> Optional["TopView[T]"]:
        if not self._data:
            return None
        return TopView(self)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.size() == 0

    def dump(self) -> str:
        """
        下から上へ全要素を repr で並べる（変更なし）
        """
        items = ", ".join(repr(item) for item in self._data)
        return f"Stack (bottom to top): [{items}]"

    def __repr__(self) -> str:
        return f"Stack(size={self.size()})"


class TopView(Generic[T]):
    """
    peek_view() が返す借用ビュー

    作成後にスタックへ push / pop があれば失効し、get() は StaleViewError。
    """

    def __init__(self, stack: Stack[T]) -> None:
        self._stack = stack
        self._version = stack._version

    def is_valid(self) -> bool:
        return self._version == self._stack._version

    def get(self) -> T:
        if not self.is_valid():
            logger.debug(
                "stale view read: created at version %d, stack now at %d",
                self._version,
                self._stack._version,
            )
            raise StaleViewError(self._version, self._stack._version)
        return self._stack._data[-1]
