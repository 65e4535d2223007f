from __future__ import annotations

from typing import List

from generic_stack.stack import Stack
from generic_stack.models import Point


def run_demo() -> List[str]:
    lines: List[str] = ["=== Generic Stack Demo ===", ""]

    # 整数スタック
    int_stack: Stack[int] = Stack.new()

    lines.append("Pushing 1, 2, 3 onto integer stack...")
    int_stack.push(1)
    int_stack.push(2)
    int_stack.push(3)

    lines.append(int_stack.dump())
    lines.append(f"Size: {int_stack.size()}")
    lines.append(f"Peek: {int_stack.peek()!r}")

    lines.append("")
    lines.append("Popping items...")
    item = int_stack.pop()
    while item is not None:
        lines.append(f"Popped: {item}")
        item = int_stack.pop()

    lines.append(f"Is empty? {int_stack.is_empty()}")
    lines.append("")

    # 文字列スタック（同じコードで別の型）
    lines.append("=== String Stack Demo ===")
    lines.append("")

    string_stack: Stack[str] = Stack.new()
    string_stack.push("Hello")
    string_stack.push("Rust")
    string_stack.push("World")

    lines.append(string_stack.dump())

    top = string_stack.peek()
    if top is not None:
        lines.append(f"Top of stack: {top}")

    # ユーザー定義型
    lines.append("")
    lines.append("=== Custom Type Stack Demo ===")
    lines.append("")

    point_stack: Stack[Point] = Stack.new()
    point_stack.push(Point(x=0, y=0))
    point_stack.push(Point(x=10, y=20))
    point_stack.push(Point(x=5, y=15))

    lines.append(point_stack.dump())

    lines.append("")
    lines.append("This demonstrates the power of generics:")
    lines.append("- One Stack implementation")
    lines.append("- Works with any type: int, str, custom classes")
    lines.append("- Type safety checked by static type checkers")
    return lines


def main() -> None:
    for line in run_demo():
        print(line)


if __name__ == "__main__":
    main()
