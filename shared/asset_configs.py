"""
Immutable record types describing validated fields, robots, and joysticks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class DefaultOrigin(Enum):
    AUTO = "auto"
    RED = "red"
    BLUE = "blue"


class PovDirection(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


class AssetKind(Enum):
    """Asset family, identified by the prefix of its folder name."""

    FIELD_2D = "Field2d"
    FIELD_3D = "Field3d"
    ROBOT = "Robot"
    JOYSTICK = "Joystick"

    @property
    def prefix(self) -> str:
        return self.value + "_"

    @property
    def primary_file(self) -> str:
        if self in (AssetKind.FIELD_2D, AssetKind.JOYSTICK):
            return "image.png"
        return "model.glb"


DEFAULT_DRIVER_STATIONS: Tuple[Point2, ...] = (
    (7.6, -2.1),
    (7.6, 0.0),
    (7.6, 2.1),
    (-7.6, 2.1),
    (-7.6, 0.0),
    (-7.6, -2.1),
)


@dataclass(frozen=True, slots=True)
class Rotation:
    axis: Axis
    degrees: float

    def to_dict(self) -> Dict[str, Any]:
        return {"axis": self.axis.value, "degrees": self.degrees}


def _rotations_to_list(rotations: Tuple[Rotation, ...]) -> List[Dict[str, Any]]:
    return [rotation.to_dict() for rotation in rotations]


def _with_source(payload: Dict[str, Any], source_url: Optional[str]) -> Dict[str, Any]:
    if source_url is not None:
        payload["sourceUrl"] = source_url
    return payload


@dataclass(frozen=True, slots=True)
class Config2d:
    """Top-down field image with its pixel bounds and physical size."""

    name: str
    path: str
    top_left: Point2 = (-1, -1)
    bottom_right: Point2 = (-1, -1)
    width_inches: float = 0
    height_inches: float = 0
    default_origin: DefaultOrigin = DefaultOrigin.AUTO
    source_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _with_source(
            {
                "name": self.name,
                "path": self.path,
                "topLeft": list(self.top_left),
                "bottomRight": list(self.bottom_right),
                "widthInches": self.width_inches,
                "heightInches": self.height_inches,
                "defaultOrigin": self.default_origin.value,
            },
            self.source_url,
        )


@dataclass(frozen=True, slots=True)
class GamePiece:
    name: str = ""
    rotations: Tuple[Rotation, ...] = ()
    position: Point3 = (0, 0, 0)
    staged_objects: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rotations": _rotations_to_list(self.rotations),
            "position": list(self.position),
            "stagedObjects": list(self.staged_objects),
        }


@dataclass(frozen=True, slots=True)
class Config3dField:
    """3D field model. Game piece ``i`` lives in ``model_i.glb``."""

    name: str
    path: str
    rotations: Tuple[Rotation, ...] = ()
    width_inches: float = 0
    height_inches: float = 0
    default_origin: DefaultOrigin = DefaultOrigin.AUTO
    driver_stations: Tuple[Point2, ...] = DEFAULT_DRIVER_STATIONS
    game_pieces: Tuple[GamePiece, ...] = ()
    source_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _with_source(
            {
                "name": self.name,
                "path": self.path,
                "rotations": _rotations_to_list(self.rotations),
                "widthInches": self.width_inches,
                "heightInches": self.height_inches,
                "defaultOrigin": self.default_origin.value,
                "driverStations": [list(station) for station in self.driver_stations],
                "gamePieces": [piece.to_dict() for piece in self.game_pieces],
            },
            self.source_url,
        )


@dataclass(frozen=True, slots=True)
class Camera:
    name: str = ""
    rotations: Tuple[Rotation, ...] = ()
    position: Point3 = (0, 0, 0)
    resolution: Point2 = (200, 100)
    fov: float = 90

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rotations": _rotations_to_list(self.rotations),
            "position": list(self.position),
            "resolution": list(self.resolution),
            "fov": self.fov,
        }


@dataclass(frozen=True, slots=True)
class RobotComponent:
    zeroed_rotations: Tuple[Rotation, ...] = ()
    zeroed_position: Point3 = (0, 0, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "zeroedRotations": _rotations_to_list(self.zeroed_rotations),
            "zeroedPosition": list(self.zeroed_position),
        }


@dataclass(frozen=True, slots=True)
class Config3dRobot:
    """3D robot model. Articulated component ``i`` lives in ``model_i.glb``."""

    name: str
    path: str
    rotations: Tuple[Rotation, ...] = ()
    position: Point3 = (0, 0, 0)
    cameras: Tuple[Camera, ...] = ()
    components: Tuple[RobotComponent, ...] = ()
    disable_simplification: bool = False
    source_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _with_source(
            {
                "name": self.name,
                "path": self.path,
                "rotations": _rotations_to_list(self.rotations),
                "position": list(self.position),
                "cameras": [camera.to_dict() for camera in self.cameras],
                "components": [component.to_dict() for component in self.components],
                "disableSimplification": self.disable_simplification,
            },
            self.source_url,
        )


@dataclass(frozen=True, slots=True)
class JoystickButton:
    is_yellow: bool = False
    center_px: Point2 = (0, 0)
    is_ellipse: bool = False
    size_px: Point2 = (0, 0)
    source_index: float = -1
    source_pov: Optional[PovDirection] = None

    def is_valid(self) -> bool:
        return self.size_px[0] > 0 and self.size_px[1] > 0 and self.source_index >= 0

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": "button",
            "isYellow": self.is_yellow,
            "centerPx": list(self.center_px),
            "isEllipse": self.is_ellipse,
            "sizePx": list(self.size_px),
            "sourceIndex": self.source_index,
        }
        if self.source_pov is not None:
            payload["sourcePov"] = self.source_pov.value
        return payload


@dataclass(frozen=True, slots=True)
class JoystickStick:
    is_yellow: bool = False
    center_px: Point2 = (0, 0)
    radius_px: float = 0
    x_source_index: float = -1
    x_source_inverted: bool = False
    y_source_index: float = -1
    y_source_inverted: bool = False
    button_source_index: Optional[float] = None

    def is_valid(self) -> bool:
        return self.radius_px > 0 and self.x_source_index >= 0 and self.y_source_index >= 0

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": "joystick",
            "isYellow": self.is_yellow,
            "centerPx": list(self.center_px),
            "radiusPx": self.radius_px,
            "xSourceIndex": self.x_source_index,
            "xSourceInverted": self.x_source_inverted,
            "ySourceIndex": self.y_source_index,
            "ySourceInverted": self.y_source_inverted,
        }
        if self.button_source_index is not None:
            payload["buttonSourceIndex"] = self.button_source_index
        return payload


@dataclass(frozen=True, slots=True)
class JoystickAxis:
    is_yellow: bool = False
    center_px: Point2 = (0, 0)
    size_px: Point2 = (0, 0)
    source_index: float = -1
    source_range: Point2 = (-1, 1)

    def is_valid(self) -> bool:
        return self.size_px[0] > 0 and self.size_px[1] > 0 and self.source_index >= 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "axis",
            "isYellow": self.is_yellow,
            "centerPx": list(self.center_px),
            "sizePx": list(self.size_px),
            "sourceIndex": self.source_index,
            "sourceRange": list(self.source_range),
        }


JoystickComponent = Union[JoystickButton, JoystickStick, JoystickAxis]


@dataclass(frozen=True, slots=True)
class ConfigJoystick:
    name: str
    path: str
    components: Tuple[JoystickComponent, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "components": [component.to_dict() for component in self.components],
        }


AssetConfig = Union[Config2d, Config3dField, Config3dRobot, ConfigJoystick]


@dataclass(slots=True)
class AssetCollection:
    """Result of a single load: validated records plus failed folder names."""

    field2ds: List[Config2d] = field(default_factory=list)
    field3ds: List[Config3dField] = field(default_factory=list)
    robots: List[Config3dRobot] = field(default_factory=list)
    joysticks: List[ConfigJoystick] = field(default_factory=list)
    load_failures: List[str] = field(default_factory=list)

    def records_for(self, kind: AssetKind) -> List[Any]:
        if kind is AssetKind.FIELD_2D:
            return self.field2ds
        if kind is AssetKind.FIELD_3D:
            return self.field3ds
        if kind is AssetKind.ROBOT:
            return self.robots
        return self.joysticks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field2ds": [config.to_dict() for config in self.field2ds],
            "field3ds": [config.to_dict() for config in self.field3ds],
            "robots": [config.to_dict() for config in self.robots],
            "joysticks": [config.to_dict() for config in self.joysticks],
            "loadFailures": list(self.load_failures),
        }
