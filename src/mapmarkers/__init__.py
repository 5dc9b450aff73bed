"""
mapmarkers: 地図描画APIに渡すマーカー設定のビルダー。

- MarkerCollection: マーカーの追加・検証・蓄積（builder.markers）
- Marker / Icon: 値オブジェクト（model.models）
- MarkerLoader: JSONドキュメントからの一括読み込み（model.loader）
"""
from mapmarkers.builder.markers import InvalidArgumentError, MarkerCollection
from mapmarkers.model.models import BOUNCE, DROP, Icon, Marker
from mapmarkers.model.loader import MarkerLoader

__all__ = [
    "BOUNCE",
    "DROP",
    "Icon",
    "InvalidArgumentError",
    "Marker",
    "MarkerCollection",
    "MarkerLoader",
]
