"""
Descriptor parsing shared by the asset loader and the legacy converter.

Each asset folder carries a ``config.json``. Reading it can fail (missing,
unreadable, not JSON, not an object) and those cases raise
``DescriptorError``. Once a descriptor is read, building a record never
fails: every recognised field is overlaid onto an all-defaults record only
when it is present and has exactly the expected shape.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from .asset_configs import (
    Axis,
    Camera,
    Config2d,
    Config3dField,
    Config3dRobot,
    ConfigJoystick,
    DEFAULT_DRIVER_STATIONS,
    DefaultOrigin,
    GamePiece,
    JoystickAxis,
    JoystickButton,
    JoystickComponent,
    JoystickStick,
    PovDirection,
    RobotComponent,
    Rotation,
)

CONFIG_FILENAME = "config.json"

T = TypeVar("T")
E = TypeVar("E")


class DescriptorError(ValueError):
    """Raised when a config.json file is missing, unreadable, or not an object."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def parse_json(contents: str) -> Any:
    """Decode standard JSON only; ``NaN`` and ``Infinity`` are rejected."""
    return json.loads(contents, parse_constant=_reject_constant)


# JSONDecodeError is a ValueError; deep nesting raises RecursionError.
JSON_ERRORS = (ValueError, RecursionError)


def read_descriptor(path: Path) -> Dict[str, Any]:
    """Load a descriptor file and return its top-level JSON object."""
    try:
        contents = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DescriptorError(f"Descriptor file not found: {path}") from exc
    except OSError as exc:
        raise DescriptorError(f"Unable to read descriptor: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DescriptorError(f"Descriptor is not valid UTF-8: {path}") from exc

    try:
        raw = parse_json(contents)
    except JSON_ERRORS as exc:
        raise DescriptorError(f"Descriptor is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise DescriptorError("Descriptor root must be a JSON object.")
    return raw


# ----------------------------------------------------------------------------
# Field combinators
# ----------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def take_string(raw: Dict[str, Any], key: str, default: T) -> str | T:
    value = raw.get(key)
    return value if isinstance(value, str) else default


def take_number(raw: Dict[str, Any], key: str, default: T) -> float | T:
    value = raw.get(key)
    return value if _is_number(value) else default


def take_bool(raw: Dict[str, Any], key: str, default: T) -> bool | T:
    value = raw.get(key)
    return value if isinstance(value, bool) else default


def take_choice(raw: Dict[str, Any], key: str, enum_type: Type[E], default: T) -> E | T:
    """Return the enum member whose value matches ``raw[key]`` exactly."""
    value = raw.get(key)
    if not isinstance(value, str):
        return default
    for member in enum_type:  # type: ignore[attr-defined]
        if member.value == value:
            return member
    return default


def _number_tuple(value: Any, arity: Optional[int]) -> Optional[Tuple[float, ...]]:
    if not isinstance(value, list) or not all(_is_number(item) for item in value):
        return None
    if arity is not None and len(value) != arity:
        return None
    return tuple(value)


def take_numbers(raw: Dict[str, Any], key: str, arity: int, default: T) -> Tuple[float, ...] | T:
    numbers = _number_tuple(raw.get(key), arity)
    return default if numbers is None else numbers


def take_strings(raw: Dict[str, Any], key: str, default: T) -> Tuple[str, ...] | T:
    value = raw.get(key)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    return default


def _parse_rotation(value: Any) -> Optional[Rotation]:
    if not isinstance(value, dict):
        return None
    axis = take_choice(value, "axis", Axis, None)
    degrees = take_number(value, "degrees", None)
    if axis is None or degrees is None:
        return None
    return Rotation(axis=axis, degrees=degrees)


def take_rotations(raw: Dict[str, Any], key: str) -> Tuple[Rotation, ...]:
    """Rotation lists are all-or-nothing: one bad entry discards the list."""
    value = raw.get(key)
    if not isinstance(value, list):
        return ()
    rotations = [_parse_rotation(item) for item in value]
    if any(rotation is None for rotation in rotations):
        return ()
    return tuple(rotations)  # type: ignore[arg-type]


def take_records(raw: Dict[str, Any], key: str, builder: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Build one sub-record per list entry; non-object entries get all defaults."""
    value = raw.get(key)
    if not isinstance(value, list):
        return []
    return [builder(item if isinstance(item, dict) else {}) for item in value]


def _take_driver_stations(raw: Dict[str, Any]) -> Tuple[Tuple[float, float], ...]:
    value = raw.get("driverStations")
    if not isinstance(value, list) or len(value) != 6:
        return DEFAULT_DRIVER_STATIONS
    stations = [_number_tuple(item, 2) for item in value]
    if any(station is None for station in stations):
        return DEFAULT_DRIVER_STATIONS
    return tuple(stations)  # type: ignore[arg-type]


# ----------------------------------------------------------------------------
# Record builders
# ----------------------------------------------------------------------------


def parse_field2d(raw: Dict[str, Any], path: str) -> Config2d:
    return Config2d(
        name=take_string(raw, "name", ""),
        path=path,
        top_left=take_numbers(raw, "topLeft", 2, (-1, -1)),
        bottom_right=take_numbers(raw, "bottomRight", 2, (-1, -1)),
        width_inches=take_number(raw, "widthInches", 0),
        height_inches=take_number(raw, "heightInches", 0),
        default_origin=take_choice(raw, "defaultOrigin", DefaultOrigin, DefaultOrigin.AUTO),
        source_url=take_string(raw, "sourceUrl", None),
    )


def _parse_game_piece(raw: Dict[str, Any]) -> GamePiece:
    return GamePiece(
        name=take_string(raw, "name", ""),
        rotations=take_rotations(raw, "rotations"),
        position=take_numbers(raw, "position", 3, (0, 0, 0)),
        staged_objects=take_strings(raw, "stagedObjects", ()),
    )


def parse_field3d(raw: Dict[str, Any], path: str) -> Config3dField:
    return Config3dField(
        name=take_string(raw, "name", ""),
        path=path,
        rotations=take_rotations(raw, "rotations"),
        width_inches=take_number(raw, "widthInches", 0),
        height_inches=take_number(raw, "heightInches", 0),
        default_origin=take_choice(raw, "defaultOrigin", DefaultOrigin, DefaultOrigin.AUTO),
        driver_stations=_take_driver_stations(raw),
        game_pieces=tuple(take_records(raw, "gamePieces", _parse_game_piece)),
        source_url=take_string(raw, "sourceUrl", None),
    )


def _parse_camera(raw: Dict[str, Any]) -> Camera:
    return Camera(
        name=take_string(raw, "name", ""),
        rotations=take_rotations(raw, "rotations"),
        position=take_numbers(raw, "position", 3, (0, 0, 0)),
        resolution=take_numbers(raw, "resolution", 2, (200, 100)),
        fov=take_number(raw, "fov", 90),
    )


def _parse_robot_component(raw: Dict[str, Any]) -> RobotComponent:
    return RobotComponent(
        zeroed_rotations=take_rotations(raw, "zeroedRotations"),
        zeroed_position=take_numbers(raw, "zeroedPosition", 3, (0, 0, 0)),
    )


def parse_robot(raw: Dict[str, Any], path: str) -> Config3dRobot:
    return Config3dRobot(
        name=take_string(raw, "name", ""),
        path=path,
        rotations=take_rotations(raw, "rotations"),
        position=take_numbers(raw, "position", 3, (0, 0, 0)),
        cameras=tuple(take_records(raw, "cameras", _parse_camera)),
        components=tuple(take_records(raw, "components", _parse_robot_component)),
        disable_simplification=take_bool(raw, "disableSimplification", False),
        source_url=take_string(raw, "sourceUrl", None),
    )


def _parse_joystick_component(raw: Any) -> Optional[JoystickComponent]:
    """Build the variant named by ``type``; unknown or missing types yield None."""
    if not isinstance(raw, dict):
        return None

    is_yellow = take_bool(raw, "isYellow", False)
    center_px = take_numbers(raw, "centerPx", 2, (0, 0))
    component_type = raw.get("type")

    if component_type == "button":
        return JoystickButton(
            is_yellow=is_yellow,
            center_px=center_px,
            is_ellipse=take_bool(raw, "isEllipse", False),
            size_px=take_numbers(raw, "sizePx", 2, (0, 0)),
            source_index=take_number(raw, "sourceIndex", -1),
            source_pov=take_choice(raw, "sourcePov", PovDirection, None),
        )
    if component_type == "joystick":
        return JoystickStick(
            is_yellow=is_yellow,
            center_px=center_px,
            radius_px=take_number(raw, "radiusPx", 0),
            x_source_index=take_number(raw, "xSourceIndex", -1),
            x_source_inverted=take_bool(raw, "xSourceInverted", False),
            y_source_index=take_number(raw, "ySourceIndex", -1),
            y_source_inverted=take_bool(raw, "ySourceInverted", False),
            button_source_index=take_number(raw, "buttonSourceIndex", None),
        )
    if component_type == "axis":
        return JoystickAxis(
            is_yellow=is_yellow,
            center_px=center_px,
            size_px=take_numbers(raw, "sizePx", 2, (0, 0)),
            source_index=take_number(raw, "sourceIndex", -1),
            source_range=take_numbers(raw, "sourceRange", 2, (-1, 1)),
        )
    return None


def parse_joystick(raw: Dict[str, Any], path: str) -> ConfigJoystick:
    components: List[JoystickComponent] = []
    raw_components = raw.get("components")
    if isinstance(raw_components, list):
        for item in raw_components:
            component = _parse_joystick_component(item)
            if component is not None:
                components.append(component)

    return ConfigJoystick(
        name=take_string(raw, "name", ""),
        path=path,
        components=tuple(components),
    )
