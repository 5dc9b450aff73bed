from __future__ import annotations
import pathlib, json, warnings
from typing import Any, Dict, List

from jsonschema import validate

from mapmarkers.builder.markers import InvalidArgumentError, MarkerCollection

DOCUMENT_KEYS = {"default_icon_path", "marker_clusterer", "fit_bounds", "markers"}


class MarkerLoader:
    """マーカー定義のJSONを読み込んで MarkerCollection に流し込むローダ"""

    def __init__(self, validate_schema: bool = True, schema_dir: str | pathlib.Path | None = None):
        self.validate_schema = validate_schema
        # デフォルト: このパッケージの schemas ディレクトリ
        if schema_dir is None:
            self.schema_dir = pathlib.Path(__file__).parent.parent / "schemas"
        else:
            self.schema_dir = pathlib.Path(schema_dir)

    def _load_json(self, path: str | pathlib.Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            schema = self._load_json(self.schema_dir / schema_name)
            validate(instance=instance, schema=schema)

    # --- 公開API ------------------------------------------------------

    def load_document(self, path: str | pathlib.Path) -> Dict[str, Any]:
        """markers.json → dict（スキーマ検証済み）"""
        data = self._load_json(path)
        self._validate(data, "markers.schema.json")
        # validate_schema=False でもドキュメントの形だけは確認する
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Marker document must be a JSON object, {type(data).__name__} was given: {path}")
        if not isinstance(data.get("markers", []), list):
            raise InvalidArgumentError(f"'markers' must be a list: {path}")

        for key in sorted(set(data) - DOCUMENT_KEYS):
            warnings.warn(f"Unknown key '{key}' in {path}")
        return data

    def load_descriptions(self, path: str | pathlib.Path) -> List[Dict[str, Any]]:
        """markers.json → マーカー記述のリスト"""
        return list(self.load_document(path).get("markers", []))

    def load_collection(
        self,
        path: str | pathlib.Path,
        collection: MarkerCollection | None = None,
    ) -> MarkerCollection:
        """
        markers.json → MarkerCollection
        コレクション設定（アイコンパス・クラスタ・fitBounds）を先に適用してからマーカーを追加する。
        """
        return self.build_collection(self.load_document(path), collection)

    def build_collection(
        self,
        data: Dict[str, Any],
        collection: MarkerCollection | None = None,
    ) -> MarkerCollection:
        """読み込み済みのドキュメント(dict) → MarkerCollection"""
        if collection is None:
            collection = MarkerCollection()

        if "default_icon_path" in data:
            collection.set_default_icon_path(data["default_icon_path"])
        if "marker_clusterer" in data:
            collection.is_marker_clusterer(data["marker_clusterer"])
        if "fit_bounds" in data:
            collection.fit_bounds(data["fit_bounds"])

        collection.add_markers(data.get("markers", []))
        return collection
