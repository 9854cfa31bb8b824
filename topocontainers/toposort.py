from __future__ import annotations

import logging
from graphlib import CycleError
from typing import Generic, Hashable, Iterator, TypeVar

__all__ = ["CycleError", "ConstraintGraph"]

log = logging.getLogger("toposort")

K = TypeVar("K", bound=Hashable)

# Visit states used during linearization
IN_PROGRESS = 1
DONE = 2


class ConstraintGraph(Generic[K]):
    """
    Set of "must come before" constraints between keys.

    Constraints are kept separate from the contents of any container: a key
    can be mentioned here without ever being added to a container, and sorting
    a container just ignores it.

    Keys without any relative constraint are linearized according to the
    iteration order of the source keys: by default it is the order in which
    keys were first used as the source of a constraint. With
    ``sort_keys=True``, source keys are visited in ascending order, and keys
    must then be comparable with each other.
    """
    def __init__(self, sort_keys: bool = False):
        # Map each key to the list of keys that must come after it
        self.adj: dict[K, list[K]] = {}
        # Visit source keys in ascending order
        self.sort_keys = sort_keys

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, self.adj)

    def __len__(self) -> int:
        return sum(len(succ) for succ in self.adj.values())

    def __bool__(self) -> bool:
        return bool(self.adj)

    def __contains__(self, key: object) -> bool:
        if key in self.adj:
            return True
        return any(key in succ for succ in self.adj.values())

    def add_constraint(self, v: K, w: K) -> None:
        """
        Record that ``v`` must come before ``w``
        """
        self.adj.setdefault(v, []).append(w)

    # Name used by the container adapters
    precede = add_constraint

    def successors(self, v: K) -> list[K]:
        """
        Return the keys that must come after ``v``, in the order the
        constraints were added
        """
        return list(self.adj.get(v, ()))

    def sources(self) -> list[K]:
        """
        Return the keys that have outgoing constraints, in visiting order
        """
        if self.sort_keys:
            return sorted(self.adj)
        return list(self.adj)

    def nodes(self) -> list[K]:
        """
        Return all the keys mentioned by constraints: sources first, then
        pure targets in the order they are first found
        """
        sources = self.sources()
        res = list(sources)
        seen = set(res)
        for v in sources:
            for w in self.adj[v]:
                if w not in seen:
                    seen.add(w)
                    res.append(w)
        return res

    def edges(self) -> Iterator[tuple[K, K]]:
        for v, succ in self.adj.items():
            for w in succ:
                yield v, w

    def clear(self) -> None:
        self.adj.clear()

    def linearize(self) -> list[K]:
        """
        Return all keys in an order where every key comes before the keys it
        is constrained to precede.

        This is a depth-first visit: each key is output after all the keys
        that follow it have been output, and the resulting post-order is then
        reversed.

        Raises CycleError if the constraints contain a cycle.
        """
        state: dict[K, int] = {}
        postorder: list[K] = []

        for root in self.sources():
            if root in state:
                continue
            self._visit(root, state, postorder)

        postorder.reverse()
        log.debug("linearized %d keys from %d constraints", len(postorder), len(self))
        return postorder

    def _visit(self, root: K, state: dict[K, int], postorder: list[K]) -> None:
        """
        Iterative depth-first visit starting from root, appending finished
        keys to postorder
        """
        state[root] = IN_PROGRESS
        # Current DFS path, with the iterator over the remaining successors of
        # each key in it
        path: list[K] = [root]
        stack: list[Iterator[K]] = [iter(self.adj.get(root, ()))]
        while stack:
            for w in stack[-1]:
                st = state.get(w)
                if st is None:
                    state[w] = IN_PROGRESS
                    path.append(w)
                    stack.append(iter(self.adj.get(w, ())))
                    break
                elif st == IN_PROGRESS:
                    cycle = path[path.index(w):] + [w]
                    log.debug("constraint cycle found: %r", cycle)
                    raise CycleError("nodes are in a cycle", cycle)
            else:
                # All successors are done
                stack.pop()
                done = path.pop()
                state[done] = DONE
                postorder.append(done)
