from typing import Any

import networkx as nx

from partialtest import settings
from partialtest.analyzer.dependency_map.dependency_types import DependencyNode
from partialtest.utils.file_util import FileUtil
from partialtest.utils.log_util import log, log_w
from partialtest.utils.subprocess_util import SubprocessUtil


class DependencyManager:
    def __init__(self, root_directory: str, root_package: str):
        self.root_directory = root_directory
        self.root_package_path = root_directory + root_package
        self.graph = nx.DiGraph()  # 依存する側 => 依存される側
        self.root_node: DependencyNode | None = None

    def generate_dependency_json(self, output_path: str) -> str:
        """ルートパッケージから辿った全パッケージの依存関係をJSONファイルに出力"""
        command = [
            settings.swift_executable,
            "package",
            "show-dependencies",
            "--package-path",
            self.root_package_path,
            "--format",
            "json",
        ]
        log("command=%s", " ".join(SubprocessUtil.quote(command)))
        result = SubprocessUtil.run(command, timeout=settings.swift_timeout, capture_output=True, check=True)
        return FileUtil.write_file(output_path, result.stdout)

    def load(self, json_path: str) -> DependencyNode:
        """依存関係のJSONファイルを読み込んでツリーとグラフを構築"""
        data = FileUtil.read_json(json_path)
        return self.load_dict(data)

    def load_dict(self, data: Any) -> DependencyNode:
        if not isinstance(data, dict):
            log_w("dependency json is not an object: %s", type(data).__name__)
        self.root_node = DependencyNode.from_dict(data)
        self.graph = self._build_graph(self.root_node)
        log("graph nodes=%d, edges=%d", self.graph.number_of_nodes(), self.graph.number_of_edges())
        return self.root_node

    def find_dependents(self, name: str) -> set[str]:
        """nameに直接または間接的に依存しているパッケージを特定"""
        try:
            return set(nx.ancestors(self.graph, name))
        except nx.NetworkXError as e:
            log("find_dependents: %s", e)
            return set()

    def find_dependencies(self, name: str) -> set[str]:
        """nameが直接または間接的に依存しているパッケージを特定"""
        try:
            return set(nx.descendants(self.graph, name))
        except nx.NetworkXError as e:
            log("find_dependencies: %s", e)
            return set()

    @staticmethod
    def _build_graph(root: DependencyNode) -> nx.DiGraph:
        graph = nx.DiGraph()
        if root.name:
            graph.add_node(root.name)
        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.children:
                if child.name:
                    graph.add_node(child.name)
                    if node.name:
                        graph.add_edge(node.name, child.name)
                stack.append(child)
        return graph
