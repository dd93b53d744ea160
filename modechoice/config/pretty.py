from typing import Any

from pydantic import BaseModel


def _repr_value(v: Any, indent: int = 0) -> str:
    try:
        val = v.__repr_with_indent__(indent)
    except AttributeError:
        if isinstance(v, dict):
            val = repr_dict_with_indent(v, indent)
        elif isinstance(v, list) and v and hasattr(v[0], "__repr_with_indent__"):
            val = "\n".join(
                "- " + j.__repr_with_indent__(0).replace("\n", "\n  ") for j in v
            )
        elif isinstance(v, list | tuple | set | frozenset) and v:
            val = repr(list(v))
            if len(val) > 70:
                val = "- " + "\n- ".join(repr(j) for j in v)
        else:
            val = repr(v)
    if "\n" in val:
        val_lines = val.split("\n")
        val = "\n  " + "\n  ".join(val_lines)
    return val


class PrettyModel(BaseModel):
    """Pretty-print as YAML style outputs."""

    def __repr_with_indent__(self, indent=0):
        i = " " * indent
        return "\n".join(f"{i}{k}: {_repr_value(v)}" for k, v in self)

    def __repr__(self):
        return f"{self.__class__.__name__}:\n" + self.__repr_with_indent__(2)


def repr_dict_with_indent(d: dict[str, Any], indent=0):
    i = " " * indent
    return "\n".join(f"{i}{k}: {_repr_value(v, indent)}" for k, v in d.items())
