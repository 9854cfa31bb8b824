from __future__ import annotations

from collections.abc import Iterator, MutableMapping, MutableSequence, Sequence
from typing import Any, Hashable, Iterable, Union, overload

from . import merge
from .toposort import ConstraintGraph


class ConstrainedMixin:
    """
    Attach a set of ordering constraints to a container.

    The constraints are independent from the container contents: keys can be
    constrained before or after they are added, or never added at all.
    """
    def _init_constraints(self, sort_keys: bool) -> None:
        self.constraints: ConstraintGraph = ConstraintGraph(sort_keys=sort_keys)

    def add_constraint(self, v: Hashable, w: Hashable) -> None:
        """
        Require that ``v`` comes before ``w`` when sorting
        """
        self.constraints.add_constraint(v, w)

    precede = add_constraint

    def linearize(self) -> list[Any]:
        """
        Return the constrained keys in topological order, ignoring the
        container contents
        """
        return self.constraints.linearize()


class TopoSortDict(ConstrainedMixin, MutableMapping):
    """
    Mapping whose items can be listed in an order that respects constraints
    between keys.

    Iteration follows insertion order, like a dict. Unconstrained keys keep
    that order when sorted.
    """
    def __init__(self, *args: Any, sort_keys: bool = False, **kw: Any):
        self.data: dict[Any, Any] = dict(*args, **kw)
        self._init_constraints(sort_keys)

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, dict(self.items()))

    def __getitem__(self, key: Any) -> Any:
        return self.data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.data[key] = value

    def __delitem__(self, key: Any) -> None:
        del self.data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def copy(self) -> TopoSortDict:
        """
        Return a copy of this mapping, including its constraints
        """
        res = self.__class__(self.data, sort_keys=self.constraints.sort_keys)
        for v, w in self.constraints.edges():
            res.add_constraint(v, w)
        return res

    def sort(self) -> list[tuple[Any, Any]]:
        """
        Return a new list of ``(key, value)`` pairs, constrained keys first in
        topological order, then the other keys in iteration order
        """
        return merge.merge_mapping(self.constraints.linearize(), self)


class TopoSortMap(TopoSortDict):
    """
    TopoSortDict that iterates its keys in ascending order.

    Constraints are also visited in ascending key order, so that sorting is
    independent of insertion order. Keys must be comparable.
    """
    def __init__(self, *args: Any, sort_keys: bool = True, **kw: Any):
        super().__init__(*args, sort_keys=sort_keys, **kw)

    def __iter__(self) -> Iterator[Any]:
        return iter(sorted(self.data))


class TopoSortList(ConstrainedMixin, MutableSequence):
    """
    List whose elements can be listed in an order that respects constraints
    between them.

    Duplicate elements are kept, and grouped together when sorting.
    """
    def __init__(self, iterable: Iterable[Any] = (), *, sort_keys: bool = False):
        self.data: list[Any] = list(iterable)
        self._init_constraints(sort_keys)

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TopoSortList):
            return self.data == other.data
        if isinstance(other, list):
            return self.data == other
        return NotImplemented

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self.data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.data[index] = value

    def __delitem__(self, index: Any) -> None:
        del self.data[index]

    def __len__(self) -> int:
        return len(self.data)

    def insert(self, index: int, value: Any) -> None:
        self.data.insert(index, value)

    def sort(self) -> list[Any]:
        """
        Return a new list with the same elements, constrained ones first in
        topological order.

        Unlike list.sort, this does not sort in place.
        """
        return merge.merge_sequence(self.constraints.linearize(), self.data)


class TopoSortArray(ConstrainedMixin, Sequence):
    """
    Fixed-length sequence whose elements can be listed in an order that
    respects constraints between them.

    Elements can be replaced, but the length cannot change. Sorting writes
    into a list of the same length, and fails with CapacityError rather than
    growing it.
    """
    def __init__(self, iterable: Iterable[Any] = (), *, sort_keys: bool = False):
        self.data: list[Any] = list(iterable)
        self._init_constraints(sort_keys)

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TopoSortArray):
            return self.data == other.data
        if isinstance(other, (list, tuple)):
            return self.data == list(other)
        return NotImplemented

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: Union[int, slice]) -> Any:
        return self.data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError(f"{self.__class__.__name__} does not support slice assignment")
        self.data[index] = value

    def __delitem__(self, index: Any) -> None:
        raise TypeError(f"{self.__class__.__name__} does not support item deletion")

    def __len__(self) -> int:
        return len(self.data)

    @property
    def capacity(self) -> int:
        return len(self.data)

    def sort(self) -> list[Any]:
        """
        Return a new list with the same elements, constrained ones first in
        topological order
        """
        return merge.merge_fixed(self.constraints.linearize(), self.data, self.capacity)


CONTAINERS: dict[str, type[ConstrainedMixin]] = {
    "dict": TopoSortDict,
    "map": TopoSortMap,
    "list": TopoSortList,
    "array": TopoSortArray,
}
