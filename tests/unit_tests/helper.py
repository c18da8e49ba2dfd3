import json
import os
import tempfile
import unittest
import unittest.mock
from typing import Any
from unittest.mock import MagicMock, patch

from partialtest.analyzer.dependency_map.dependency_types import DependencyNode

# テスト用の依存ツリー(swift package show-dependencies の形式)
ROOT_DIR = "/proj/"


def make_node(name: str, dependencies: list[dict] | None = None, root_dir: str = ROOT_DIR) -> dict:
    return {
        "name": name,
        "url": f"{root_dir}Packages/{name}",
        "version": "unspecified",
        "path": f"{root_dir}Packages/{name}",
        "dependencies": dependencies or [],
    }


def make_tree(data: dict) -> DependencyNode:
    return DependencyNode.from_dict(data)


def make_test_plan(*package_names: str) -> dict:
    return {
        "configurations": [{"id": "C0FFEE", "name": "Configuration 1", "options": {}}],
        "defaultOptions": {"codeCoverage": False},
        "testTargets": [
            {
                "target": {
                    "containerPath": f"container:Packages/{name}",
                    "identifier": f"{name}Tests",
                    "name": f"{name}Tests",
                }
            }
            for name in package_names
        ],
        "version": 1,
    }


class MockManager:
    """複数のモックをmock_nameという名前でアクセスできるようにするクラス"""

    def __init__(self):
        self.mock_dict: dict[str, MagicMock] = {}
        self._init_default_mocks()

    def _init_default_mocks(self):
        # swiftの実行を無効化するfixtureを生成
        self._set_mock(
            "fixture_subprocess_run_ok",
            "partialtest.utils.subprocess_util.SubprocessUtil.run",
            return_value=MagicMock(returncode=0, stdout="{}", stderr=""),
        )

    def _set_mock(self, mock_name: str, mock_target: str, return_value: Any = ""):
        # モックを生成してreturn_valueを設定
        self.mock_dict[mock_name] = self._parameterized_mock_factory(mock_target, return_value)

    def _parameterized_mock_factory(self, mock_target: str, return_value: Any):
        instance = MagicMock()
        instance.return_value = return_value
        patcher = patch(mock_target, instance)
        return patcher.start()

    def get_mock(self, mock_name: str) -> None | MagicMock:
        return self.mock_dict.get(mock_name)

    def get_mock_call_count(self, mock_name: str):
        return self.get_mock(mock_name).call_count

    def set_mock_return_value(self, mock_target: str = "", mock_alias: str = "", return_value: Any = "") -> None:
        # モックをmock_dictから取り出すときの名前
        mock_name = mock_alias if mock_alias else mock_target
        if not mock_name:
            return

        mock = self.get_mock(mock_name)
        if mock:
            # 既存のモックに値だけ設定
            mock.return_value = return_value
        else:
            self._set_mock(mock_name, mock_target, return_value)

    def set_mock_side_effect(self, mock_target: str = "", mock_alias: str = "", side_effect: Any = None) -> None:
        mock_name = mock_alias if mock_alias else mock_target
        if mock_name not in self.mock_dict:
            self._set_mock(mock_name, mock_target)
        self.mock_dict[mock_name].side_effect = side_effect


class BaseTestCase(unittest.TestCase):
    def setUp(self):
        # swift呼び出しを無効化するmockをセットアップ
        self.mock_manager = MockManager()
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_dir = self._tmp_dir.name + "/"

    def tearDown(self):
        # モックを停止
        patch.stopall()
        self._tmp_dir.cleanup()

    def write_json(self, file_name: str, data: Any) -> str:
        file_path = os.path.join(self.tmp_dir, file_name)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return file_path

    def read_json(self, file_name: str) -> Any:
        with open(os.path.join(self.tmp_dir, file_name), encoding="utf-8") as f:
            return json.load(f)

    def check_mock_call_count(self, mock_name: str, expected_count: int):
        self.assertEqual(self.mock_manager.get_mock_call_count(mock_name), expected_count, mock_name)

    def check_mock_call_count_subprocess_run(self, expected_count: int):
        self.check_mock_call_count("fixture_subprocess_run_ok", expected_count)

    def set_mock_return_value(self, mock_target: str = "", mock_alias: str = "", return_value: Any = ""):
        self.mock_manager.set_mock_return_value(
            mock_target=mock_target, mock_alias=mock_alias, return_value=return_value
        )

    def set_mock_side_effect(self, mock_target: str = "", mock_alias: str = "", side_effect: Any = None):
        self.mock_manager.set_mock_side_effect(mock_target=mock_target, mock_alias=mock_alias, side_effect=side_effect)
