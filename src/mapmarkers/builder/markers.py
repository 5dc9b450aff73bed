from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from mapmarkers.model.models import (
    BOUNCE,
    DROP,
    Icon,
    Marker,
    is_valid_color,
)


class InvalidArgumentError(ValueError):
    """不正な引数（呼び出し側で回復可能）"""


def _describe(value: Any) -> str:
    return f"{value!r} ({type(value).__name__})"


class MarkerCollection:
    """
    マーカー定義を挿入順に蓄積するビルダー。
    - message / icon / color は直近に追加したマーカー（カーソル）に付与される
    - markerClusterer / fitBounds はコレクション全体のフラグ
    """

    DROP = DROP
    BOUNCE = BOUNCE

    def __init__(self):
        self._markers: List[Marker] = []
        self._cursor: Optional[int] = None
        self._icon_default_path: Optional[str] = None
        self._bound: bool = False
        self._marker_clusterer: bool = False

    # ---- 追加 -------------------------------------------------------------
    def add_markers(self, markers: Iterable[Mapping[str, Any]]) -> None:
        """
        構造化された記述をまとめて追加。
        途中で失敗した場合、それまでに追加したマーカーは残る（ロールバックしない）。
        """
        for marker in markers:
            self._create_marker(marker)

    def add_marker(self, position, animation: Union[bool, str] = False, title: Any = None) -> "MarkerCollection":
        if not isinstance(animation, (bool, str)):
            raise InvalidArgumentError(f"Animation must be string or boolean, {_describe(animation)} was given")

        self._markers.append(Marker(
            position=tuple(position),
            title="" if title is None else str(title),
            animation=animation,
            visible=True,
        ))
        self._cursor = len(self._markers) - 1
        return self

    # ---- 参照 -------------------------------------------------------------
    def get_marker(self) -> Optional[Marker]:
        if self._cursor is None:
            return None
        return self._markers[self._cursor]

    def get_markers(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    def delete_markers(self) -> None:
        self._markers = []
        self._cursor = None

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(tuple(self._markers))

    # ---- カーソルへの付与 ---------------------------------------------------
    def set_message(self, message: str, auto_open: bool = False) -> "MarkerCollection":
        self._require_cursor("setMessage")
        self._update_cursor(message=message, auto_open=auto_open)
        return self

    def set_icon(self, icon: Union[str, Icon]) -> "MarkerCollection":
        if isinstance(icon, Icon):
            value: Union[str, Icon] = icon.resolve(self._icon_default_path)
        elif isinstance(icon, str):
            value = icon if self._icon_default_path is None else self._icon_default_path + icon
        else:
            raise InvalidArgumentError(f"Icon must be string or Icon, {_describe(icon)} was given")

        self._require_cursor("setIcon")
        self._update_cursor(icon=value)
        return self

    def set_color(self, color: str) -> "MarkerCollection":
        """color: 24bit (0xRRGGBB) または green, purple, yellow, blue, orange, red"""
        if not is_valid_color(color):
            raise InvalidArgumentError("Color must be 24-bit color or from the allowed list.")
        self._require_cursor("setColor")
        self._update_cursor(color=color)
        return self

    # ---- コレクション全体のフラグ --------------------------------------------
    def is_marker_clusterer(self, cluster: bool = True) -> "MarkerCollection":
        if not isinstance(cluster, bool):
            raise InvalidArgumentError(f"cluster must be boolean, {_describe(cluster)} was given")
        self._marker_clusterer = cluster
        return self

    def get_marker_clusterer(self) -> bool:
        return self._marker_clusterer

    def fit_bounds(self, bound: bool = True) -> "MarkerCollection":
        """全マーカーが収まるようにビューポートを合わせる"""
        if not isinstance(bound, bool):
            raise InvalidArgumentError(f"fitBounds must be boolean, {_describe(bound)} was given")
        self._bound = bound
        return self

    def get_bound(self) -> bool:
        return self._bound

    def set_default_icon_path(self, default_path: Optional[str]) -> "MarkerCollection":
        if default_path is not None and not isinstance(default_path, str):
            raise InvalidArgumentError(f"Default icon path must be string or None, {_describe(default_path)} was given")
        if default_path is not None and not default_path.endswith(("/", "\\")):
            default_path += "/"
        self._icon_default_path = default_path
        return self

    def get_default_icon_path(self) -> Optional[str]:
        return self._icon_default_path

    # ---- 出力 -------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "markers": [m.to_dict() for m in self._markers],
            "markerClusterer": self._marker_clusterer,
            "fitBounds": self._bound,
        }

    # ---- 内部 -------------------------------------------------------------
    def _require_cursor(self, operation: str) -> None:
        if self._cursor is None:
            raise InvalidArgumentError(f"{operation} must be called after addMarker()")

    def _update_cursor(self, **changes: Any) -> None:
        self._markers[self._cursor] = replace(self._markers[self._cursor], **changes)

    def _create_marker(self, marker: Mapping[str, Any]) -> None:
        if not isinstance(marker, Mapping):
            raise InvalidArgumentError(f"Marker description must be a mapping, {_describe(marker)} was given")
        if "coordinates" not in marker:
            raise InvalidArgumentError("Coordinates must be set in every marker")

        self.add_marker(
            _values(marker["coordinates"]),
            marker["animation"] if marker.get("animation") is not None else False,
            marker.get("title"),
        )

        if marker.get("message") is not None:
            message = marker["message"]
            if isinstance(message, (list, tuple, Mapping)):
                pair = _values(message)
                if not pair:
                    raise InvalidArgumentError("Message must be string or [message, autoOpen] pair")
                self.set_message(pair[0], pair[1] if len(pair) > 1 else False)
            else:
                self.set_message(message)

        if "icon" in marker:
            icon = marker["icon"]
            if isinstance(icon, Mapping):
                if "url" not in icon:
                    raise InvalidArgumentError("Icon url must be set in structured icon")
                self.set_icon(Icon.from_dict(icon))
            else:
                self.set_icon(icon)

        if "color" in marker:
            self.set_color(marker["color"])


# ----------------- ヘルパ -----------------

def _values(value: Any) -> list:
    # {"lat": .., "lng": ..} のような辞書も値の並びとして扱う
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)
