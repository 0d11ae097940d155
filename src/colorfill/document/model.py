"""JSON document holding a single color field."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from colorfill.models import ColorValue, JsonColorValue


class ColorDocument(BaseModel):
    """A JSON object of the form ``{"color": <color value>}``.

    The color field accepts every shape the parser does and dumps back
    in canonical form. Other keys in the source object are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    color: JsonColorValue = Field(description="Rainbow, hex color or array of hex colors")

    @field_serializer("color")
    def serialize_color(self, color: ColorValue) -> str | list[str]:
        """Serialize the color back into its JSON shape."""
        return color.to_json()
