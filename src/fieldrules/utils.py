"""
Contains some useful utility functions to build accessors and predicates and to render values in messages.
"""
from typing import Any, Callable, Optional, TypeVar, overload

from typeguard import check_type

AttrT = TypeVar("AttrT")


def render_value(value: Any) -> str:
    """
    Renders a value the way it shows up in failure messages and the way its size is measured:
    None becomes 'null', booleans are lower case and lists, tuples and sets are rendered like '[a, b]'
    (without the quotes python would put around strings).
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(render_value(element) for element in value) + "]"
    return str(value)


def non_null_max_len(value: Any, max_len: int) -> bool:
    """
    Returns True iff the value is present and its rendered form is not longer than max_len.
    Other than the size checkers this does not let None pass.
    """
    return value is not None and len(render_value(value)) <= max_len


@overload
def attribute(attribute_path: str, attribute_type: type[AttrT]) -> Callable[[Any], AttrT]:
    ...


@overload
def attribute(attribute_path: str, attribute_type: Any = Any) -> Callable[[Any], Any]:
    ...


def attribute(attribute_path: str, attribute_type: Any = Any) -> Callable[[Any], Any]:
    """
    Creates an accessor which queries the object with the provided (dotted) `attribute_path`.
    If the attribute doesn't exist the accessor raises an AttributeError naming the missing part of the path.
    The found value is checked against `attribute_type`; a mismatch raises a typeguard.TypeCheckError.
    Both errors are no validation failures, they propagate out of `RuleSet.validate`.
    E.g.:
    ```
    rule_set.add_rule(attribute("address.city", Optional[str]), not_null("city"))
    ```
    """
    splitted_path = attribute_path.split(".")

    def accessor(obj: Any) -> Any:
        current_obj: Any = obj
        for index, attr_name in enumerate(splitted_path):
            try:
                current_obj = getattr(current_obj, attr_name)
            except AttributeError as error:
                current_path = ".".join(splitted_path[0 : index + 1])
                raise AttributeError(f"'{current_path}' does not exist") from error
        check_type(current_obj, attribute_type)
        return current_obj

    accessor.__name__ = f"attribute({attribute_path!r})"
    return accessor


def optional_attribute(attribute_path: str, attribute_type: type[AttrT]) -> Callable[[Any], Optional[AttrT]]:
    """
    Like `attribute` but the accessor returns None if any part of the path doesn't exist.
    Use it to let the "absent passes" policy of the size and valid values checkers apply to missing attributes.
    A type mismatch of an existing attribute still raises.
    """
    required = attribute(attribute_path, attribute_type)

    def accessor(obj: Any) -> Optional[AttrT]:
        try:
            return required(obj)
        except AttributeError:
            return None

    accessor.__name__ = f"optional_attribute({attribute_path!r})"
    return accessor
