"""``@tool`` decorator.

Turns a (usually async) method into a tool definition that ``DecoratorPlugin``
can discover. Parameter descriptions come from ``Annotated[T, Field(...)]``
hints first and Google-style ``Args:`` docstring entries second.

Example:
    ```python
    @tool(description="Get the weather forecast for a specified date and location")
    async def get_forecast_for_date(
        self,
        date: Annotated[str, Field(description="The date for the forecast")],
        location: str,
    ) -> Forecast:
        '''Args:
            location: The location for the forecast
        '''
    ```
"""

import inspect
import re
from collections.abc import Callable
from types import UnionType
from typing import Annotated, Any, Literal, TypeVar, Union, get_args, get_origin, get_type_hints

from pydantic.fields import FieldInfo

from forecast_agent.plugins.base import Tool, ToolParameter, ToolParameterType

F = TypeVar("F", bound=Callable[..., Any])

_TOOL_ATTR = "_forecast_tool"

# bool is checked before int since it subclasses int
_SCALAR_TYPES: tuple[tuple[type, ToolParameterType], ...] = (
    (bool, ToolParameterType.BOOLEAN),
    (int, ToolParameterType.INTEGER),
    (float, ToolParameterType.NUMBER),
    (str, ToolParameterType.STRING),
)
_CONTAINER_TYPES = {
    list: ToolParameterType.ARRAY,
    tuple: ToolParameterType.ARRAY,
    set: ToolParameterType.ARRAY,
    dict: ToolParameterType.OBJECT,
}

_ARGS_HEADER = re.compile(r"^(args|arguments|parameters):$", re.IGNORECASE)
_SECTION_HEADER = re.compile(r"^[A-Z][A-Za-z ]*:$")
_ARG_LINE = re.compile(r"^(\w+)\s*(?:\([^)]*\))?\s*:\s*(.*)$")


def tool(name: str | None = None, description: str | None = None) -> Callable[[F], F]:
    """Mark a function as a tool.

    Args:
        name: Tool name, defaults to the function name
        description: Tool description, defaults to the first docstring line

    Returns:
        Decorator that attaches a ``Tool`` to the function and returns it unchanged
    """

    def decorator(func: F) -> F:
        docstring = inspect.getdoc(func) or ""
        try:
            hints = get_type_hints(func, include_extras=True)
        except Exception:
            hints = {}
        param_docs = _parse_param_docs(docstring)

        parameters = [
            _build_parameter(param, hints.get(param.name, str), param_docs)
            for param in inspect.signature(func).parameters.values()
            if param.name != "self"
            and param.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]

        setattr(
            func,
            _TOOL_ATTR,
            Tool(
                name=name or func.__name__,
                description=description or docstring.split("\n", 1)[0],
                parameters=parameters,
            ),
        )
        return func

    return decorator


def _build_parameter(
    param: inspect.Parameter, hint: Any, param_docs: dict[str, str]
) -> ToolParameter:
    field_info = _field_info(hint)
    base_type = _unwrap(hint)

    if param.default is not inspect.Parameter.empty:
        required, default = False, param.default
    elif field_info is not None and not field_info.is_required():
        required, default = False, field_info.default
    else:
        required, default = True, None

    if field_info is not None and field_info.description:
        text = field_info.description
    else:
        text = param_docs.get(param.name, f"Parameter {param.name}")

    return ToolParameter(
        name=param.name,
        type=_python_type_to_tool_type(base_type),
        description=text,
        required=required,
        default=default,
        enum=list(get_args(base_type)) if get_origin(base_type) is Literal else None,
    )


def _field_info(hint: Any) -> FieldInfo | None:
    if get_origin(hint) is not Annotated:
        return None
    return next((m for m in hint.__metadata__ if isinstance(m, FieldInfo)), None)


def _unwrap(hint: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers."""
    origin = get_origin(hint)
    if origin is Annotated:
        return _unwrap(get_args(hint)[0])
    if origin is Union or origin is UnionType:
        members = [a for a in get_args(hint) if a is not type(None)]
        return _unwrap(members[0]) if members else hint
    return hint


def _parse_param_docs(docstring: str) -> dict[str, str]:
    """Map parameter names to their ``Args:`` descriptions.

    Continuation lines are joined onto the previous entry; any other
    section header ends the block.
    """
    docs: dict[str, str] = {}
    in_args = False
    current: str | None = None

    for raw in docstring.splitlines():
        line = raw.strip()
        if _ARGS_HEADER.match(line):
            in_args, current = True, None
            continue
        if not in_args or not line:
            continue
        if _SECTION_HEADER.match(line):
            in_args = False
            continue

        match = _ARG_LINE.match(line)
        if match:
            current = match.group(1)
            docs[current] = match.group(2)
        elif current is not None:
            docs[current] = f"{docs[current]} {line}"

    return docs


def _python_type_to_tool_type(python_type: Any) -> ToolParameterType:
    if get_origin(python_type) is Literal:
        values = get_args(python_type)
        return _python_type_to_tool_type(type(values[0])) if values else ToolParameterType.STRING

    for scalar, tool_type in _SCALAR_TYPES:
        if python_type is scalar:
            return tool_type

    return _CONTAINER_TYPES.get(get_origin(python_type) or python_type, ToolParameterType.STRING)


def get_tool_from_function(func: Callable[..., Any]) -> Tool | None:
    """Return the ``Tool`` attached by ``@tool``, or None."""
    return getattr(func, _TOOL_ATTR, None)


def is_tool(func: Callable[..., Any]) -> bool:
    return get_tool_from_function(func) is not None
