from __future__ import annotations

from pydantic import BaseModel, Field

from partialtest import settings


class PartialTestParams(BaseModel):
    root_directory: str = Field(default="", description="プロジェクトのルートディレクトリ(末尾は/)")
    root_package: str = Field(default="", description="ルートパッケージ(root_directoryからの相対パス)")
    test_plan: str = Field(default="", description="テストプラン名(拡張子なし)")
    changed_files: list[str] = Field(default_factory=list, description="プルリクエストで変更されたファイル")
    dependency_json: str = Field(default="", description="既存の依存関係JSON(指定時はswiftを実行しない)")
    dry_run: bool = Field(default=False, description="テストプランを書き換えない")

    def normalize(self) -> PartialTestParams:
        # パッケージのpathから取り除く接頭辞になるので末尾を/で揃える
        if self.root_directory and not self.root_directory.endswith("/"):
            self.root_directory += "/"
        return self

    @property
    def test_plan_file(self) -> str:
        test_plan = self.test_plan
        if not test_plan.endswith(settings.test_plan_ext):
            test_plan += settings.test_plan_ext
        return self.root_directory + test_plan

    @property
    def dependency_json_file(self) -> str:
        if self.dependency_json:
            return self.dependency_json
        return self.root_directory + settings.dependency_json_name

    @property
    def should_generate_dependency_json(self) -> bool:
        return not self.dependency_json
