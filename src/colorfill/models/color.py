"""Color model for decoded hex colors."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The model is frozen so colors are hashable and compare by component.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, token: str) -> "Color":
        """Create a color from a hex token such as '#ff0000' or '#f00'.

        Raises:
            ColorFormatError: If the token is not a valid hex color
        """
        from colorfill.codec.hex import decode_hex

        red, green, blue = decode_hex(token)
        return cls(r=red, g=green, b=blue)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to canonical hex color string (e.g., '#ff0000').

        Returns:
            str: Lowercase hex color string in format '#rrggbb'

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#ff0000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
