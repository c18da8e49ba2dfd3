from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypedDict


def normalize_path(path: str, prefix: str) -> str:
    """絶対パスからプロジェクトルートの接頭辞を取り除く(文字列としての前方一致のみ)"""
    if prefix and path.startswith(prefix):
        return path[len(prefix) :]
    return path


@dataclass(frozen=True)
class Dependency:
    name: str
    path: str  # プロジェクトルートからの相対パス(例: Packages/Foo)


@dataclass
class DependencyNode:
    name: str = ""
    path: str = ""  # swift package show-dependencies が出力する絶対パス
    children: list[DependencyNode] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> DependencyNode:
        """show-dependencies のJSONをノードに変換する

        フィールドが欠けている、または型が違うノードは空文字/空リストで補完する。
        1つの壊れたノードで全体の解析を止めないため、ここでは例外を出さない。
        """
        if not isinstance(data, dict):
            return cls()
        name = data.get("name")
        path = data.get("path")
        dependencies = data.get("dependencies")
        if not isinstance(dependencies, list):
            dependencies = []
        return cls(
            name=name if isinstance(name, str) else "",
            path=path if isinstance(path, str) else "",
            children=[cls.from_dict(child) for child in dependencies],
        )

    def to_dependency(self, root_directory_prefix: str) -> Dependency:
        return Dependency(name=self.name, path=normalize_path(self.path, root_directory_prefix))


class ImpactResult(TypedDict):
    changed_packages: set[str]
    impacted: set[Dependency]
    dependents: dict[str, set[str]]
