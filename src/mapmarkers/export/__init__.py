# export/__init__.py
"""
Export layer: マーカードキュメントを描画側が読むJSONに変換するCLI。

- ExportConfig: config(json) + CLI 引数の統合
- cli.main: mapmarkers-export のエントリポイント
"""
__all__ = ["config", "cli"]
