import typing

import ujson

JsonSerializableType = str | int | float | bool | None
JsonSerializable = JsonSerializableType | typing.Mapping[str, "JsonSerializable"] | typing.Sequence["JsonSerializable"]


def dumps_str(obj: JsonSerializable) -> str:
    return ujson.dumps(obj, escape_forward_slashes=False, ensure_ascii=False)


__all__ = [
    "JsonSerializable",
    "JsonSerializableType",
    "dumps_str",
]
