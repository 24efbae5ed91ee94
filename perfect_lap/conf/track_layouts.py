"""Track layout loading from YAML."""

from pathlib import Path
from typing import List, Optional
import yaml

from perfect_lap.schemas.config import SectorDefinition

DEFAULT_LAYOUTS_FILE = Path(__file__).parent / "track_layouts.yaml"


def load_track_layout(
    layout_name: str, layouts_file: Optional[str | Path] = None
) -> List[SectorDefinition]:
    """Load the ordered sector definitions for a circuit.

    Args:
        layout_name: Layout key in the YAML file (e.g., 'cota')
        layouts_file: YAML file path (defaults to the packaged layouts)

    Returns:
        List of SectorDefinition in track order

    Raises:
        ValueError: If the layout is not defined
    """
    config_path = Path(layouts_file) if layouts_file else DEFAULT_LAYOUTS_FILE

    with open(config_path, "r", encoding="utf-8") as f:
        layouts = yaml.safe_load(f) or {}

    if layout_name not in layouts:
        raise ValueError(f"Track layout '{layout_name}' not found in {config_path.name}")

    return [
        SectorDefinition(
            name=str(entry["name"]),
            start_distance=float(entry["start"]),
            end_distance=float(entry.get("end", float("inf"))),
        )
        for entry in layouts[layout_name]["sectors"]
    ]
