"""Day 8: walking a left/right network of nodes."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from aocsolver.common import DEFAULT_INPUT, run_challenge

START = "AAA"
END = "ZZZ"


@dataclass(frozen=True)
class Network:
    """The left/right instructions and, per node, its left and right neighbours."""

    path: str
    nodes: dict[str, tuple[str, str]] = field(default_factory=dict)

    def move(self, position: str, direction: str) -> str:
        """The node reached from *position* going *direction* ('R' is right, anything else left)."""
        left, right = self.nodes[position]
        return right if direction == "R" else left

    def walk_path(self, position: str) -> str:
        """The node reached from *position* after following the whole path once."""
        for direction in self.path:
            position = self.move(position, direction)
        return position


def _parse_node(line: str) -> tuple[str, tuple[str, str]]:
    parts = line.split(" = ")
    if len(parts) < 2:
        raise ValueError(f"not a node: {line!r}")
    targets = parts[1][1:-1].split(", ")
    if len(targets) < 2:
        raise ValueError(f"node needs two neighbours: {line!r}")
    return parts[0], (targets[0], targets[1])


def parse_network(lines: Iterable[str]) -> Network:
    """Read the path from the first line and the nodes from the rest."""
    source = iter(lines)
    path = next(source, "")
    nodes = dict(_parse_node(line) for line in source if line != "")
    return Network(path=path, nodes=nodes)


def solve_part_a(lines: Iterable[str]) -> int:
    """Steps from AAA to ZZZ, rounded up to whole repetitions of the path."""
    network = parse_network(lines)
    if not network.path:
        raise ValueError("empty path")
    position = START
    distance = 0
    while position != END:
        for direction in network.path:
            position = network.move(position, direction)
            distance += 1
            if position == END:
                break
    if distance == 0:
        raise ValueError("start and end coincide")
    return math.lcm(len(network.path), distance)


def solve_part_b(lines: Iterable[str]) -> int:
    """Steps until every node ending in 'A' stands on a node ending in 'Z'."""
    network = parse_network(lines)
    starts = [node for node in network.nodes if node[2:3] == "A"]
    if not starts:
        raise ValueError("no starting nodes")

    cycles_per_node = []
    for position in starts:
        cycles = 0
        while position[2:3] != "Z":
            position = network.walk_path(position)
            cycles += 1
        cycles_per_node.append(cycles)

    return math.lcm(*cycles_per_node) * len(network.path)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 8.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)