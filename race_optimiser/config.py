"""Configuration loader for the race setup engine."""

from pathlib import Path

import yaml

from race_optimiser.core.track import TrackProfile

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
TRACKS_PATH: Path = DATA_DIR / "tracks.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "lap_length_km",
    "total_race_distance_km",
    "ambient_temp_c",
    "is_wet",
    "number_of_curves",
    "number_of_chicanes",
    "has_long_straights",
    "elevation_gain_m",
)

_FLOAT_FIELDS: tuple[str, ...] = (
    "lap_length_km",
    "total_race_distance_km",
    "ambient_temp_c",
    "elevation_gain_m",
)
_INT_FIELDS: tuple[str, ...] = ("number_of_curves", "number_of_chicanes")
_BOOL_FIELDS: tuple[str, ...] = ("is_wet", "has_long_straights")


def load_track_presets(path: Path | None = None) -> list[TrackProfile]:
    """Load the preset circuits from a YAML file.

    Each entry is validated and converted into a :class:`TrackProfile`.

    Args:
        path: Optional override for the presets file path.

    Returns:
        List of :class:`TrackProfile` objects in file order.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If any entry is missing fields or has values of the
            wrong type or out of range.
    """
    tracks_path = path or TRACKS_PATH
    if not tracks_path.exists():
        raise FileNotFoundError(f"Track presets file not found: {tracks_path}")

    with open(tracks_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    entries: list[dict] = data["tracks"]
    tracks: list[TrackProfile] = []

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Track entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate types ---
        for field in _FLOAT_FIELDS + _INT_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Track entry {idx} ({entry['name']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )
        for field in _INT_FIELDS:
            if not float(entry[field]).is_integer():
                raise ValueError(
                    f"Track entry {idx} ({entry['name']}): "
                    f"'{field}' must be a whole number, got {entry[field]}"
                )
        for field in _BOOL_FIELDS:
            if not isinstance(entry[field], bool):
                raise ValueError(
                    f"Track entry {idx} ({entry['name']}): "
                    f"'{field}' must be true or false, got {entry[field]!r}"
                )

        # TrackProfile raises InvalidInputError (a ValueError) on bad ranges.
        tracks.append(
            TrackProfile(
                name=str(entry["name"]),
                lap_length_km=float(entry["lap_length_km"]),
                total_race_distance_km=float(entry["total_race_distance_km"]),
                ambient_temp_c=float(entry["ambient_temp_c"]),
                is_wet=entry["is_wet"],
                number_of_curves=int(entry["number_of_curves"]),
                number_of_chicanes=int(entry["number_of_chicanes"]),
                has_long_straights=entry["has_long_straights"],
                elevation_gain_m=float(entry["elevation_gain_m"]),
            )
        )

    return tracks


def find_track(name: str, tracks: list[TrackProfile]) -> TrackProfile:
    """Return the track called *name* (case-insensitive).

    Raises:
        KeyError: If no track has that name.
    """
    wanted = name.strip().lower()
    for track in tracks:
        if track.name.lower() == wanted:
            return track
    available = ", ".join(t.name for t in tracks)
    raise KeyError(f"Unknown track {name!r}. Available: {available}")
