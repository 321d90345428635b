from dataclasses import dataclass

from .errors import ArrayContainsObject
from .values import JsonArray, JsonBool, JsonNull, JsonNumber, JsonObject, JsonString, to_json_text


# Rendered form of a constant
@dataclass(frozen=True)
class Scalar:
    text: str


@dataclass(frozen=True)
class Array:
    items: tuple

    def __len__(self):
        return len(self.items)


def render_scalar(value) -> str:
    if isinstance(value, JsonString):
        return value.value
    if isinstance(value, JsonNumber):
        return value.literal
    if isinstance(value, JsonBool):
        return 'true' if value.value else 'false'
    if isinstance(value, JsonNull):
        return ''
    raise TypeError(f'Not a scalar value: {value!r}')


def _check_no_object(value, location):
    if isinstance(value, JsonObject):
        raise ArrayContainsObject(location)
    if isinstance(value, JsonArray):
        for index, item in enumerate(value.items):
            _check_no_object(item, f'{location}[{index}]')


def render_array_item(item, location) -> str:
    _check_no_object(item, location)

    # nested arrays keep their JSON text
    if isinstance(item, JsonArray):
        return to_json_text(item)
    return render_scalar(item)


def classify_and_render(value, location=''):
    """Render a JSON value as a Scalar or an Array of texts.

    Objects are namespaces and never reach this point from the builder;
    an Object inside an array raises ArrayContainsObject naming its path.
    """
    if isinstance(value, JsonObject):
        raise TypeError(f'Objects are rendered as namespaces, got one at {location}')

    if isinstance(value, JsonArray):
        items = [render_array_item(item, f'{location}[{index}]') for index, item in enumerate(value.items)]
        return Array(tuple(items))

    return Scalar(render_scalar(value))
