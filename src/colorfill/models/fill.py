"""Tagged union of the accepted JSON color shapes."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter

from .color import Color


class _ColorValueBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> str | list[str]:
        """Encode back into the JSON shape this variant stands for."""
        from colorfill.codec.serializer import serialize_color_value

        return serialize_color_value(self)


class Rainbow(_ColorValueBase):
    """The literal "rainbow" keyword."""

    kind: Literal["rainbow"] = "rainbow"


class Single(_ColorValueBase):
    """One decoded hex color."""

    kind: Literal["single"] = "single"
    color: Color


class Many(_ColorValueBase):
    """An ordered run of colors, encoded as a JSON array."""

    kind: Literal["many"] = "many"
    colors: tuple[Color, ...] = ()


ColorValue = Union[Rainbow, Single, Many]


def _parse_raw(value):
    # Already-built variants pass through; raw JSON goes through the parser
    if isinstance(value, _ColorValueBase):
        return value

    from colorfill.codec.parser import parse_color_value
    from colorfill.exceptions import ColorTypeError

    try:
        return parse_color_value(value)
    except ColorTypeError as e:
        # pydantic only turns ValueError into a validation error
        raise ValueError(e.user_message) from e


JsonColorValue = Annotated[ColorValue, BeforeValidator(_parse_raw)]
"""ColorValue that validates from raw JSON ("rainbow", "#f00", [...])."""

ColorValueAdapter: TypeAdapter = TypeAdapter(JsonColorValue)
