from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union
import re

Position = Tuple[float, ...]
Pair = Tuple[float, float]


# --- 定数 -------------------------------------------------------------

DROP = "DROP"
BOUNCE = "BOUNCE"

COLOR_PALETTE = ("green", "purple", "yellow", "blue", "orange", "red")
HEX_COLOR = re.compile(r"^0x[a-f0-9]{6}$", re.IGNORECASE)

# scheme付きURL (http://, https://, data: など)
_URI_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*:", re.IGNORECASE)


def is_valid_color(color: Any) -> bool:
    """パレット名 or 24bit hex (0xRRGGBB)"""
    if not isinstance(color, str):
        return False
    return color in COLOR_PALETTE or HEX_COLOR.match(color) is not None


# --- アイコン -----------------------------------------------------------

@dataclass(frozen=True)
class Icon:
    """構造化アイコン (url + size/anchor/origin)"""
    url: str
    size: Optional[Pair] = None
    anchor: Optional[Pair] = None
    origin: Optional[Pair] = None

    def __post_init__(self):
        # list で渡されても tuple に揃える（不変・hash可能）
        for key in ("size", "anchor", "origin"):
            value = getattr(self, key)
            if value is not None:
                object.__setattr__(self, key, tuple(value))

    def is_absolute(self) -> bool:
        return self.url.startswith("/") or _URI_SCHEME.match(self.url) is not None

    def resolve(self, default_path: str | None) -> "Icon":
        """default_path を前置したコピーを返す。絶対URLはそのまま。"""
        if default_path is None or self.is_absolute():
            return self
        return replace(self, url=default_path + self.url)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"url": self.url}
        for key in ("size", "anchor", "origin"):
            value = getattr(self, key)
            if value is not None:
                d[key] = list(value)
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Icon":
        return cls(url=data["url"], size=data.get("size"), anchor=data.get("anchor"), origin=data.get("origin"))


IconValue = Union[str, Icon]


# --- マーカー -----------------------------------------------------------

@dataclass(frozen=True)
class Marker:
    position: Position
    title: str = ""
    animation: Union[bool, str] = False
    visible: bool = True
    message: Optional[str] = None
    auto_open: Optional[bool] = None
    icon: Optional[IconValue] = None
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """描画側に渡すプレーンデータ（未設定の任意項目は含めない）"""
        d: Dict[str, Any] = {
            "position": list(self.position),
            "title": self.title,
            "animation": self.animation,
            "visible": self.visible,
        }
        if self.message is not None:
            d["message"] = self.message
            d["autoOpen"] = self.auto_open
        if self.icon is not None:
            d["icon"] = self.icon.to_dict() if isinstance(self.icon, Icon) else self.icon
        if self.color is not None:
            d["color"] = self.color
        return d


__all__ = [
    "DROP",
    "BOUNCE",
    "COLOR_PALETTE",
    "HEX_COLOR",
    "is_valid_color",
    "Icon",
    "IconValue",
    "Marker",
    "Pair",
    "Position",
]
