# config.py
from dataclasses import dataclass
from pathlib import Path
import json

@dataclass
class ExportConfig:
    markers: str | None = None
    marker_clusterer: bool | None = None
    fit_bounds: bool | None = None
    default_icon_path: str | None = None
    validate_schema: bool = True
    indent: int | None = 2
    out: str | None = None

def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)
