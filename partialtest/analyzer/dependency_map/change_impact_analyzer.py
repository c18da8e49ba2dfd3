from collections.abc import Iterable

from partialtest import settings
from partialtest.analyzer.change_extractor import extract_changed_packages
from partialtest.analyzer.dependency_map.dependency_manager import DependencyManager
from partialtest.analyzer.dependency_map.dependency_types import ImpactResult
from partialtest.analyzer.dependency_map.impact_resolver import resolve_impact


class ChangeImpactAnalyzer:
    def __init__(self, dependency_manager: DependencyManager):
        self.dm = dependency_manager

    def analyze_change(
        self, changed_files: Iterable[str], packages_dir: str = settings.packages_dir_name
    ) -> ImpactResult:
        """変更の影響範囲を分析"""
        if self.dm.root_node is None:
            raise ValueError("依存関係が読み込まれていません。DependencyManager.load()を先に実行してください。")

        # 変更されたパッケージを特定
        changed_packages = extract_changed_packages(changed_files, packages_dir)

        # 影響を受けるパッケージを特定
        impacted = resolve_impact(self.dm.root_node, changed_packages, self.dm.root_directory)

        # 変更パッケージ毎の依存元(表示用)
        dependents = {name: self.dm.find_dependents(name) for name in changed_packages}

        return ImpactResult(changed_packages=changed_packages, impacted=impacted, dependents=dependents)
