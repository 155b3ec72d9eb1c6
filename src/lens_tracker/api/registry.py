from __future__ import annotations

import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union, get_args, get_origin

JsonSchema = Dict[str, Any]

_JSON_TYPES = {str: "string", int: "integer", float: "number", bool: "boolean", dict: "object", list: "array"}


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return _JSON_TYPES.get(origin or annotation, "string")


@dataclass(frozen=True)
class ApiFunction:
    """A named entry point shared by the HTTP server, MCP, and CLI."""

    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]

    @property
    def parameter_schema(self) -> JsonSchema:
        # Annotations are strings under postponed evaluation.
        hints = inspect.get_annotations(self.func, eval_str=True)
        properties: JsonSchema = {}
        required: list[str] = []
        for param in inspect.signature(self.func).parameters.values():
            entry: JsonSchema = {"type": _json_type(hints.get(param.name, str))}
            if param.default is inspect.Parameter.empty:
                required.append(param.name)
            elif isinstance(param.default, (str, int, float, bool)):
                entry["default"] = param.default
            properties[param.name] = entry
        schema: JsonSchema = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "parameters": self.parameter_schema,
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def call_api(name: str, **kwargs: Any) -> Any:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name].func(**kwargs)
