"""Color model for cell rendering."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color.

    The model is frozen so colors can be shared between widgets and used
    as dict keys.
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
    def from_hex(cls, value: str) -> "Color":
        """Create a color from a '#RRGGBB' string.

        Example:
            >>> Color.from_hex("#0000FF")
            Color(r=0, g=0, b=255)
        """
        text = value.strip().lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Expected '#RRGGBB', got {value!r}")
        return cls(r=int(text[0:2], 16), g=int(text[2:4], 16), b=int(text[4:6], 16))

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


# Lit cells are blue, unlit cells a dim grey
LED_BLUE = Color(r=0, g=0, b=255)
LED_GREY = Color(r=76, g=76, b=76)
