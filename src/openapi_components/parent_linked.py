"""Parent-linked named collections used by the components model.

A ``ParentLinkedDict`` is an insertion-ordered mapping from component names
to payload objects which keeps two rules true after every mutation:

* every stored value has its ``parent`` attribute pointing at the owner the
  collection was constructed with, and
* assigning ``None`` to a key removes that key.

Both rules are restored by a single change hook (:meth:`ParentLinkedDict.relink`)
that re-scans the whole collection rather than only the touched key. Bulk
updates, replacements and repeated hook invocations therefore all converge on
the same state.

Example::

    from openapi_components.models import Schema
    from openapi_components.parent_linked import ParentLinkedDict

    owner = object()
    schemas = ParentLinkedDict(owner)
    pet = Schema(type="object")
    schemas["Pet"] = pet
    assert pet.parent is owner

    schemas["Pet"] = None      # same end state as schemas.remove("Pet")
    assert "Pet" not in schemas

Notes:
    * Values must be ``ComponentObject`` instances or ``None``; anything
      else raises ``TypeError`` before the collection changes.
    * The collection is single-threaded; wrap it with your own lock when
      several writers share it.
    * ``entries()`` and ``iter()`` work on snapshots, so mutating the
      collection while iterating is safe.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from .models import ComponentObject

logger = logging.getLogger(__name__)


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(
            f"Component names must be strings, got {type(key).__name__}: {key!r}"
        )


def _check_value(value: Any) -> None:
    if value is not None and not isinstance(value, ComponentObject):
        raise TypeError(
            f"Component values must be ComponentObject or None, got {type(value).__name__}"
        )


class ParentLinkedDict(MutableMapping):
    """Ordered ``str`` -> payload mapping that back-links values to an owner.

    Args:
        owner: Object every stored value's ``parent`` is set to. Fixed for the
            lifetime of the collection.
        items: Optional initial entries (mapping or iterable of pairs). They
            are applied after the hook is active so they are linked as well.

    Raises:
        ValueError: If ``owner`` is ``None``.
    """

    def __init__(
        self,
        owner: Any,
        items: Optional[Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]] = None,
    ) -> None:
        if owner is None:
            raise ValueError("ParentLinkedDict requires an owner")
        self._data: Dict[str, Any] = {}
        self._owner = owner
        # hook becomes active only once the owner is known
        self._hook_active = True
        if items:
            self.update(items)

    @property
    def owner(self) -> Any:
        """Object that every stored value's ``parent`` points at."""
        return self._owner

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        _check_key(key)
        _check_value(value)
        self._data[key] = value
        self.relink()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self.relink()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    # ------------------------------------------------------------------
    # Collection API
    # ------------------------------------------------------------------
    def set(self, key: str, value: Any) -> None:
        """Insert or replace ``key``; ``None`` removes it (no-op when absent)."""
        self[key] = value

    def remove(self, key: str) -> bool:
        """Remove ``key`` if present.

        Returns:
            bool: True when an entry was removed, False when ``key`` was absent.
        """
        _check_key(key)
        removed = self._data.pop(key, None) is not None
        self.relink()
        return removed

    def entries(self) -> Iterator[Tuple[str, Any]]:
        """Iterate ``(key, value)`` pairs of a snapshot taken at call time."""
        return iter(list(self._data.items()))

    def update(self, *args: Any, **kwargs: Any) -> None:
        """Bulk insert; the hook runs once after every pair has been stored."""
        pairs: Dict[str, Any] = dict(*args, **kwargs)
        for key, value in pairs.items():
            _check_key(key)
            _check_value(value)
        self._data.update(pairs)
        self.relink()

    def clear(self) -> None:
        self._data.clear()
        self.relink()

    def relink(self) -> None:
        """Drop ``None`` entries and point every remaining value at the owner.

        Idempotent; safe to call on an empty collection or several times for
        one logical mutation.
        """
        if not getattr(self, "_hook_active", False):
            return
        removed = []
        for key, value in list(self._data.items()):
            if value is None:
                self._data.pop(key, None)
                removed.append(key)
            else:
                value.parent = self._owner
        logger.debug(
            f"Relinked {len(self._data)} entries to {type(self._owner).__name__}"
            + (f", removed {removed}" if removed else "")
        )
