from __future__ import annotations

import logging
from typing import Sized

from ..containers import TopoSortArray, TopoSortDict, TopoSortList, TopoSortMap
from ..pretty import pformat
from ..toposort import ConstraintGraph
from .command import Command, Fail, register

log = logging.getLogger("demo")

# F before C, F before A, E before A, and so on
EDGES = [
    ("F", "C"),
    ("F", "A"),
    ("E", "A"),
    ("E", "B"),
    ("C", "D"),
    ("D", "B"),
]


def check_size(name: str, container: Sized, result: Sized) -> None:
    if len(container) != len(result):
        raise Fail(f"{name}: sorting {len(container)} items produced {len(result)} items")


@register
class Demo(Command):
    """
    Show how constraints reorder the contents of each container type
    """

    def example_graph(self) -> None:
        graph: ConstraintGraph[str] = ConstraintGraph(sort_keys=True)
        for v, w in EDGES:
            graph.precede(v, w)

        # F E A C D B
        print("# constraints only")
        for key in graph.linearize():
            print(key)

    def example_map(self) -> None:
        g: TopoSortMap = TopoSortMap()
        for v, w in EDGES:
            g.precede(v, w)

        for value, key in enumerate("ABCDEF"):
            g[key] = value
        g["X"] = 100
        g["Y"] = 101
        g["Z"] = 102

        # [(F, 5), (E, 4), (A, 0), (C, 2), (D, 3), (B, 1), (X, 100), (Y, 101), (Z, 102)]
        v = g.sort()
        print("# map")
        print(pformat(v))
        check_size("map", g, v)

    def example_dict(self) -> None:
        g: TopoSortDict = TopoSortDict()
        for v, w in EDGES:
            g.precede(v, w)

        for value, key in enumerate("ABCDEF"):
            g[key] = value
        g["X"] = 100
        g["Y"] = 101
        g["Z"] = 102

        # Constraints can be added after the contents
        g.precede("Z", "F")

        # [(Z, 102), (E, 4), (F, 5), (A, 0), (C, 2), (D, 3), (B, 1), (X, 100), (Y, 101)]
        v = g.sort()
        print("# dict")
        print(pformat(v))
        check_size("dict", g, v)

    def example_list(self) -> None:
        g: TopoSortList = TopoSortList(sort_keys=True)
        for v, w in EDGES:
            g.precede(v, w)

        g.extend(["A", "A", "A", "B", "B", "C", "C", "D", "D", "E", "E", "F", "F", "F"])

        # Z is not in the list, so it is ignored
        g.precede("Z", "F")

        # [F, F, F, E, E, A, A, A, C, C, D, D, B, B]
        v = g.sort()
        print("# list")
        print(pformat(v))
        check_size("list", g, v)

        # Now that Z is in the list, it comes first
        g.append("Z")
        # [Z, F, F, F, E, E, A, A, A, C, C, D, D, B, B]
        v2 = g.sort()
        print(pformat(v2))
        check_size("list", g, v2)

        g3 = TopoSortList(range(10))
        g3.precede(9, 0)
        g3.precede(8, 1)
        g3.precede(7, 2)
        g3.precede(6, 3)
        g3.precede(5, 4)

        # [5, 4, 6, 3, 7, 2, 8, 1, 9, 0]
        v3 = g3.sort()
        print(pformat(v3))
        check_size("list", g3, v3)

    def example_array(self) -> None:
        g = TopoSortArray(["A", "B", "C", "D", "E", "F", "X", "Y", "Z"], sort_keys=True)
        for v, w in EDGES:
            g.precede(v, w)

        # [F, E, A, C, D, B, X, Y, Z]
        v = g.sort()
        print("# array")
        print(pformat(v))
        check_size("array", g, v)

    def run(self) -> None:
        self.example_graph()
        self.example_map()
        self.example_dict()
        self.example_list()
        self.example_array()
