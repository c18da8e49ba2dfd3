from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from partialtest.analyzer.dependency_map.dependency_types import Dependency, DependencyNode
from partialtest.utils.log_util import log, log_d


@dataclass
class _Frame:
    node: DependencyNode
    children: Iterator[DependencyNode] = field(init=False)
    found: bool = False  # 配下に変更パッケージが見つかったか

    def __post_init__(self):
        self.children = iter(self.node.children)


def subtree_impact(node: DependencyNode, name: str, root_directory_prefix: str) -> set[Dependency]:
    """nodeの部分木のうち、変更パッケージnameの影響を受けるパッケージを返す

    以下を含む:
    1. name 自身
    2. name に直接または間接的に依存している途中のパッケージ(nodeも含む)

    name より下(nameが依存しているパッケージ)は辿らない。
    深い依存ツリーでも再帰上限に当たらないよう、明示的なスタックで後順走査する。
    """
    if node.name == name:
        return {node.to_dependency(root_directory_prefix)}

    impact: set[Dependency] = set()
    stack = [_Frame(node)]
    while stack:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            # 子を全て処理し終えたので、見つかっていれば自分を追加して親に伝える
            stack.pop()
            if frame.found:
                impact.add(frame.node.to_dependency(root_directory_prefix))
                if stack:
                    stack[-1].found = True
            continue

        if child.name == name:
            impact.add(child.to_dependency(root_directory_prefix))
            frame.found = True
        else:
            stack.append(_Frame(child))
    return impact


def resolve_impact(root: DependencyNode, changed: Iterable[str], root_directory_prefix: str) -> set[Dependency]:
    """変更パッケージ毎の影響範囲を計算して和集合を返す(changedが空なら空集合)"""
    names = set(changed)
    impact: set[Dependency] = set()
    for name in sorted(names):
        if not name:
            # 空の名前は壊れたノード(name欠落)に一致してしまうため無視する
            log_d("skip empty package name")
            continue
        name_impact = subtree_impact(root, name, root_directory_prefix)
        if not name_impact:
            log("package not found in dependency tree: %s", name)
        impact |= name_impact
    log("resolve_impact changed=%s, impact(len)=%d", sorted(names), len(impact))
    return impact
