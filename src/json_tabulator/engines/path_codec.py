"""Key-path flattening and unflattening of nested documents."""

import copy
import logging
from typing import Any, Dict, List, Optional, Union

Container = Union[Dict[str, Any], List[Any]]


def is_index_segment(segment: str) -> bool:
    """
    Decide whether a key-path segment addresses a list element.

    This is the single place where an object key is mistaken for an array
    index: a header such as ``items.0`` unflattens to a list, and so does a
    key that was literally named ``"0"`` in the source document. Swap this
    function out to move to a schema-driven decision.

    Only ASCII digit strings count. The browser editor this tool replaces
    treated any finite numeric segment (``-1``, ``1.5``, ``1e2``) as an
    index; those segments stay object keys here because a list has no
    slot for them and the value would be lost.
    """
    return segment.isdigit() and segment.isascii()


class PathCodec:
    """
    Converts nested dictionaries to and from flat key-path records.

    Only non-empty dictionaries are expanded. Lists, scalars, ``None`` and
    empty dictionaries are leaves and are stored verbatim at their path.
    """

    def __init__(self, separator: str = ".", logger: Optional[logging.Logger] = None):
        """
        Initialize the path codec.

        Args:
            separator: Segment separator used in key paths
            logger: Optional logger instance
        """
        if not separator:
            raise ValueError("separator cannot be empty")
        self.separator = separator
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, document: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
        """
        Flatten a nested dictionary into key paths.

        Args:
            document: Dictionary to flatten
            prefix: Key path of ``document`` inside its parent

        Returns:
            Flat record mapping key paths to leaf values
        """
        flat: Dict[str, Any] = {}
        lead = prefix + self.separator if prefix else ""

        for key, value in document.items():
            path = lead + str(key)
            if isinstance(value, dict) and value:
                flat.update(self.flatten(value, path))
            else:
                flat[path] = value

        return flat

    def unflatten(self, flat: Dict[str, Any]) -> Dict[str, Any]:
        """
        Rebuild a nested dictionary from a flat record.

        Keys are processed in order and the last one processed wins when a
        path is used both as a leaf and as a branch: walking through a leaf
        replaces it with a container, and assigning a leaf replaces whatever
        container was there.

        Args:
            flat: Flat record mapping key paths to values

        Returns:
            Nested dictionary
        """
        result: Dict[str, Any] = {}

        for path, value in flat.items():
            segments = str(path).split(self.separator)
            cursor: Container = result

            for position, segment in enumerate(segments[:-1]):
                wants_list = is_index_segment(segments[position + 1])
                child = self._get(cursor, segment)

                if isinstance(child, dict):
                    pass
                elif isinstance(child, list):
                    if not wants_list:
                        child = self._list_to_dict(child)
                        self._set(cursor, segment, child)
                else:
                    if child is not None:
                        self.logger.debug(f"Key path '{path}' replaces leaf at segment '{segment}'")
                    child = [] if wants_list else {}
                    self._set(cursor, segment, child)

                cursor = child

            if isinstance(value, (dict, list)):
                # later paths may descend into this leaf
                value = copy.deepcopy(value)
            self._set(cursor, segments[-1], value)

        return result

    def _get(self, container: Container, segment: str) -> Any:
        """Read a child from a dict or list container."""
        if isinstance(container, list):
            index = int(segment)
            return container[index] if index < len(container) else None
        return container.get(segment)

    def _set(self, container: Container, segment: str, value: Any) -> None:
        """Assign a child in a dict or list container, padding lists with None."""
        if isinstance(container, list):
            index = int(segment)
            if index >= len(container):
                container.extend([None] * (index + 1 - len(container)))
            container[index] = value
        else:
            container[segment] = value

    @staticmethod
    def _list_to_dict(items: List[Any]) -> Dict[str, Any]:
        return {str(index): item for index, item in enumerate(items)}


_default_codec = PathCodec()


def flatten(document: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten ``document`` with the default ``.`` separator."""
    return _default_codec.flatten(document)


def unflatten(flat: Dict[str, Any]) -> Dict[str, Any]:
    """Unflatten ``flat`` with the default ``.`` separator."""
    return _default_codec.unflatten(flat)
