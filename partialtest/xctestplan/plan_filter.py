from collections.abc import Iterable
from typing import Any

from partialtest import settings
from partialtest.analyzer.dependency_map.dependency_types import Dependency
from partialtest.utils.log_util import log


def container_reference(path: str, container_prefix: str = settings.container_prefix) -> str:
    """テストプラン内でパッケージを参照するときの表記 (例: container:Packages/Foo)"""
    return container_prefix + path


def get_container_path(entry: Any) -> str | None:
    """testTargetsの要素からcontainerPathを取り出す(形式が不正ならNone)"""
    if not isinstance(entry, dict):
        return None
    target = entry.get("target")
    if not isinstance(target, dict):
        return None
    container_path = target.get("containerPath")
    if not isinstance(container_path, str):
        return None
    return container_path


def filter_test_targets(
    plan: dict[str, Any], impact: Iterable[Dependency], container_prefix: str = settings.container_prefix
) -> dict[str, Any]:
    """影響を受けたパッケージのテストターゲットだけを残したテストプランを返す

    - 順番は元のテストプランのまま
    - impactが空なら全てのテストターゲットを削除する
    - containerPathが読めないテストターゲットは削除する
    - plan自体は変更しない
    """
    keep_references = {container_reference(dependency.path, container_prefix) for dependency in impact}

    test_targets = plan.get("testTargets")
    if not isinstance(test_targets, list):
        test_targets = []

    kept_targets = []
    for entry in test_targets:
        container_path = get_container_path(entry)
        if container_path is not None and container_path in keep_references:
            kept_targets.append(entry)
        else:
            log("remove test target: %s", container_path)

    filtered_plan = dict(plan)
    filtered_plan["testTargets"] = kept_targets
    return filtered_plan
