from dataclasses import fields, is_dataclass
from typing import Any, Dict, Hashable, TypeVar

from hashbag.interface.bag import Bag

ElementT = TypeVar("ElementT", bound=Hashable)


def dictify(data: Any) -> Any:
    # Need to ensure we make return objects fully serializable
    if isinstance(data, (bool, int, float, str)) or data is None:
        return data
    elif isinstance(data, (list, tuple)):
        return [dictify(x) for x in data]
    elif isinstance(data, dict):
        return {k: dictify(v) for k, v in data.items()}
    elif is_dataclass(data) and not isinstance(data, type):
        result = {}
        for f in fields(data):
            value = getattr(data, f.name)
            result[f.name] = dictify(value)
        return result
    else:
        raise TypeError(f"Type {type(data)} cannot be handled by `dictify`")


def asdict_extended(data) -> Dict[str, Any]:
    """Convert a results dataclass (possibly holding nested dicts and dataclasses) into a dict."""
    if not is_dataclass(data) or isinstance(data, type):
        raise TypeError(f"asdict_extended only for use on dataclasses, input is type {type(data)}")

    return dictify(data)


def count_table(bag: Bag[ElementT]) -> Dict[ElementT, int]:
    """Map from every distinct element of `bag` to its count, in iteration order."""
    return {element: bag.count(element) for element in bag.distinct()}
