"""Data model definitions, the boundary between catalog, compute and render layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """8-bit color triple."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_rgba(self, alpha: float = 1.0) -> str:
        """CSS rgba() string, used for glow color stops."""
        return f"rgba({self.r}, {self.g}, {self.b}, {alpha})"

    def to_int(self) -> int:
        """Pack into a 24-bit integer (0xRRGGBB)."""
        return (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def from_int(cls, value: int) -> "RGB":
        return cls(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255)

    def to_unit(self) -> tuple[float, float, float]:
        """Channels scaled to [0, 1] (matplotlib color format)."""
        return (self.r / 255, self.g / 255, self.b / 255)


@dataclass(frozen=True)
class CalibrationPoint:
    """A single color ramp entry."""

    temperature_k: float
    color: RGB


@dataclass(frozen=True)
class StarRecord:
    """One catalog row. Read-only input to the compute layer."""

    name: str
    ra_deg: float  # Right ascension (degrees)
    dec_deg: float  # Declination (degrees)
    distance_pc: float  # Distance (parsecs), >= 0
    luminosity: float  # Solar luminosities, >= 0
    temperature_k: float  # Estimated effective temperature (Kelvin)


@dataclass(frozen=True)
class VisualAttributes:
    color: RGB
    radius: float  # Sphere radius in scene units


@dataclass(frozen=True)
class Position3D:
    """Cartesian position in parsecs, origin at the Sun."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class StarEntity:
    """A renderable star. The unit consumed by renderers and the picker."""

    name: str
    distance_pc: float  # 0 marks the reference body
    position: Position3D
    visual: VisualAttributes


@dataclass(frozen=True)
class Camera:
    """Perspective camera looking from position toward target."""

    position: tuple[float, float, float] = (0.0, 0.0, 10.0)
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fov_deg: float = 50.0  # Vertical field of view
    aspect: float = 1.0  # Width / height
    near: float = 0.1
    far: float = 1000.0
    min_distance: float = 1.0  # Orbit zoom limits
    max_distance: float = 18.0


@dataclass(frozen=True)
class Ray:
    origin: tuple[float, float, float]
    direction: tuple[float, float, float]  # Unit length


@dataclass(frozen=True)
class Pick:
    """A ray hit. distance is measured along the ray from its origin."""

    entity: StarEntity
    distance: float


@dataclass(frozen=True)
class CatalogData:
    """The sole input to renderers. Fully computed state."""

    source: str  # Path or URL the records were loaded from
    entities: tuple[StarEntity, ...]  # Reference body first, if included
