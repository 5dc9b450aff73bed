# cli.py
import argparse, json, sys
from pathlib import Path

from jsonschema import ValidationError

from .config import ExportConfig, load_json
from mapmarkers.builder.markers import InvalidArgumentError, MarkerCollection
from mapmarkers.model.loader import MarkerLoader

OVERRIDE_KEYS = ("default_icon_path", "marker_clusterer", "fit_bounds")

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Resolve a marker document into renderer-ready JSON")
    p.add_argument("--config", help="export settings (json)")
    p.add_argument("--markers", help="marker document (json)")
    p.add_argument("--cluster", dest="marker_clusterer", action="store_const", const=True)
    p.add_argument("--no-cluster", dest="marker_clusterer", action="store_const", const=False)
    p.add_argument("--fit-bounds", dest="fit_bounds", action="store_const", const=True)
    p.add_argument("--no-fit-bounds", dest="fit_bounds", action="store_const", const=False)
    p.add_argument("--icon-path", dest="default_icon_path")
    p.add_argument("--no-validate", dest="validate_schema", action="store_const", const=False)
    p.add_argument("--indent", type=int)
    p.add_argument("--out")
    return p.parse_args(argv)

def build(cfg: ExportConfig) -> MarkerCollection:
    loader = MarkerLoader(validate_schema=cfg.validate_schema)
    data = loader.load_document(cfg.markers)
    # ドキュメントの設定をCLI/configで上書き
    for k in OVERRIDE_KEYS:
        v = getattr(cfg, k)
        if v is not None: data[k] = v
    return loader.build_collection(data)

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg_dict = load_json(args.config)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"[ERROR] config: {e}", file=sys.stderr)
        return 1
    # JSONをデフォルトに、CLIで上書き
    for k, v in vars(args).items():
        if k == "config": continue
        if v is not None: cfg_dict[k] = v
    try:
        cfg = ExportConfig(**cfg_dict)
    except TypeError as e:
        print(f"[ERROR] config: {e}", file=sys.stderr)
        return 1

    if not cfg.markers:
        print("[ERROR] marker document is not set (--markers)", file=sys.stderr)
        return 1

    try:
        collection = build(cfg)
    except ValidationError as e:
        print(f"[ERROR] {cfg.markers}: {e.message}", file=sys.stderr)
        return 1
    except (InvalidArgumentError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"[ERROR] {cfg.markers}: {e}", file=sys.stderr)
        return 1

    if not len(collection):
        print(f"[WARN] no markers in {cfg.markers}", file=sys.stderr)

    text = json.dumps(collection.to_dict(), indent=cfg.indent, ensure_ascii=False)
    if cfg.out:
        out = Path(cfg.out); out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        print(f"[Export] {len(collection)} markers -> {out.resolve()}", file=sys.stderr)
    else:
        print(text)
    return 0

if __name__ == "__main__":
    sys.exit(main())
