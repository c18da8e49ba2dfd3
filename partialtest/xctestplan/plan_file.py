from collections.abc import Iterable
from typing import Any

from partialtest import settings
from partialtest.analyzer.dependency_map.dependency_types import Dependency
from partialtest.utils.file_util import FileUtil
from partialtest.utils.log_util import log, log_w
from partialtest.xctestplan.plan_filter import filter_test_targets, get_container_path


class TestPlanFile:
    """xctestplanファイルの読み書き"""

    __test__ = False  # pytestの収集対象外

    def __init__(self, path: str, container_prefix: str = settings.container_prefix):
        self.path = path
        self.container_prefix = container_prefix

    def load(self) -> dict[str, Any]:
        plan = FileUtil.read_json(self.path)
        if not isinstance(plan, dict):
            raise ValueError(f"テストプランの形式が不正です: {self.path}")
        return plan

    def save(self, plan: dict[str, Any]) -> str:
        return FileUtil.write_json(self.path, plan)

    def prune(self, impact: Iterable[Dependency], *, dry_run: bool = False) -> tuple[list[str], list[str]]:
        """影響のないテストターゲットを削除して保存し、(残したもの, 削除したもの)のcontainerPathを返す"""
        plan = self.load()
        filtered_plan = filter_test_targets(plan, impact, self.container_prefix)

        kept_entries = filtered_plan["testTargets"]
        all_entries = plan.get("testTargets") if isinstance(plan.get("testTargets"), list) else []
        kept_ids = {id(entry) for entry in kept_entries}
        kept = [get_container_path(entry) or "" for entry in kept_entries]
        removed = [get_container_path(entry) or "" for entry in all_entries if id(entry) not in kept_ids]

        if not kept:
            log_w("no test targets left in %s", self.path)
        if dry_run:
            log("dry run: %s is not updated", self.path)
        else:
            self.save(filtered_plan)
        return kept, removed
