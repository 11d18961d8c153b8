"""Bid records held in a binary search tree keyed by bid id, with a menu-driven command."""

from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from bidtree.csvparser import CsvError, Parser

DEFAULT_CSV_PATH = "eBid_Monthly_Sales_Dec_2016.csv"
DEFAULT_BID_KEY = "98109"

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class Bid:
    """A single auction bid."""

    bid_id: str = ""
    title: str = ""
    fund: str = ""
    amount: float = 0.0


@dataclass(slots=True)
class _Node:
    bid: Bid
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Bids ordered by ``bid_id``; equal ids are placed to the right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, bid: Bid) -> None:
        """Add a bid to the tree."""
        new_node = _Node(bid)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if node.bid.bid_id > bid.bid_id:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def remove(self, bid_id: str) -> bool:
        """Remove the bid with ``bid_id``; return False if it is not present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.bid.bid_id != bid_id:
            parent = node
            node = node.left if bid_id < node.bid.bid_id else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.bid = successor.bid
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return True

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def search(self, bid_id: str) -> Optional[Bid]:
        """Return the bid with ``bid_id``, or None if there is none."""
        node = self._root
        while node is not None:
            if node.bid.bid_id == bid_id:
                return node.bid
            node = node.left if bid_id < node.bid.bid_id else node.right
        return None

    def in_order(self) -> Iterator[Bid]:
        """Yield bids in ascending id order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.bid
            node = node.right

    def pre_order(self) -> Iterator[Bid]:
        """Yield each bid before the bids of its subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.bid
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Bid]:
        """Yield each bid after the bids of its subtrees."""
        stack = [self._root] if self._root is not None else []
        reversed_order: list[Bid] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node.bid)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    def __iter__(self) -> Iterator[Bid]:
        return self.in_order()


def str_to_double(text: str, ch: str) -> float:
    """Strip every ``ch`` from ``text`` and read its leading number, 0.0 if none."""
    match = _LEADING_NUMBER.match(text.replace(ch, ""))
    return float(match.group(1)) if match else 0.0


def format_bid(bid: Bid) -> str:
    """Render a bid as ``id: title | amount | fund``."""
    return f"{bid.bid_id}: {bid.title} | {bid.amount:g} | {bid.fund}"


def load_bids(csv_path: str, tree: BinarySearchTree) -> int:
    """Read bids from a CSV file into ``tree``; return how many were inserted."""
    print(f"Loading CSV file {csv_path}")
    parser = Parser(csv_path)
    print("".join(f"{column} | " for column in parser.header))

    loaded = 0
    try:
        for row in parser:
            tree.insert(
                Bid(
                    bid_id=row[1],
                    title=row[0],
                    fund=row[8],
                    amount=str_to_double(row[4], "$"),
                )
            )
            loaded += 1
    except CsvError as error:
        print(error, file=sys.stderr)
    return loaded


def _print_elapsed(seconds: float) -> None:
    print(f"time: {round(seconds * 1_000_000)} clock ticks")
    print(f"time: {seconds:g} seconds")


_MENU = (
    "Menu:\n"
    "  1. Load Bids\n"
    "  2. Display All Bids\n"
    "  3. Find Bid\n"
    "  4. Remove Bid\n"
    "  9. Exit Program"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive bid menu."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        csv_path, bid_key = args[0], DEFAULT_BID_KEY
    elif len(args) == 2:
        csv_path, bid_key = args[0], args[1]
    else:
        csv_path, bid_key = DEFAULT_CSV_PATH, DEFAULT_BID_KEY

    tree = BinarySearchTree()
    while True:
        print(_MENU)
        try:
            answer = input("Enter choice: ")
        except EOFError:
            break
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = 0

        if choice == 9:
            break
        if choice == 1:
            start = time.process_time()
            try:
                load_bids(csv_path, tree)
            except CsvError as error:
                print(error, file=sys.stderr)
            _print_elapsed(time.process_time() - start)
        elif choice == 2:
            for bid in tree.in_order():
                print(format_bid(bid))
        elif choice == 3:
            start = time.process_time()
            bid = tree.search(bid_key)
            elapsed = time.process_time() - start
            if bid is not None:
                print(format_bid(bid))
            else:
                print(f"Bid Id {bid_key} not found.")
            _print_elapsed(elapsed)
        elif choice == 4:
            tree.remove(bid_key)
        else:
            print("Please enter a selection")

    print("Good bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())