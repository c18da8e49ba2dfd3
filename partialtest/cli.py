import argparse
import sys

import partialtest
from partialtest.analyzer.dependency_map.change_impact_analyzer import ChangeImpactAnalyzer
from partialtest.analyzer.dependency_map.dependency_manager import DependencyManager
from partialtest.schema.schema import PartialTestParams
from partialtest.utils.log_util import log, log_e
from partialtest.utils.rich_console import display_error, display_impact_result, display_params
from partialtest.utils.subprocess_util import SubprocessUtil
from partialtest.xctestplan.plan_file import TestPlanFile

# 上流(swift/ファイル)の失敗は全て致命的エラーとして扱う
# (json.JSONDecodeError は ValueError に含まれる)
FATAL_ERRORS = (OSError, ValueError, SubprocessUtil.CalledProcessError, SubprocessUtil.TimeoutExpired)


def main(argv: list[str] | None = None) -> None:
    """メイン処理(args前処理、パラメータ設定)"""
    log("========================================")
    log("||       partialtest cli start        ||")
    log("========================================")
    parser = argparse.ArgumentParser(
        description="変更の影響を受けないパッケージのテストをテストプランから取り除きます",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("root_directory", help="プロジェクトのルートディレクトリ", nargs="?")
    parser.add_argument("root_package", help="プロジェクトのルートパッケージ", nargs="?")
    parser.add_argument("test_plan", help="テストプランファイル(.xctestplanは省略可)", nargs="?")
    parser.add_argument("changed_files", help="プルリクエストで変更されたファイル", nargs="*")
    parser.add_argument("--dependency-json", help="既存の依存関係JSON(指定時はswiftを実行しない)", default="")
    parser.add_argument("--dry-run", action="store_true", help="テストプランを書き換えずに結果だけ表示")
    parser.add_argument("-v", "--version", action="store_true", help="バージョン情報を表示")
    args = parser.parse_args(argv)
    if args.version:
        show_version_and_exit()

    if not (args.root_directory and args.root_package and args.test_plan):
        show_usage_and_exit()

    params = PartialTestParams(
        root_directory=args.root_directory,
        root_package=args.root_package,
        test_plan=args.test_plan,
        changed_files=args.changed_files,
        dependency_json=args.dependency_json,
        dry_run=args.dry_run,
    ).normalize()
    display_params(params)

    try:
        main_exec(params)
    except FATAL_ERRORS as e:
        log_e("partialtest failed: %s", e)
        display_error(f"{type(e).__name__}: {e}")
        sys.exit(1)


def main_exec(params: PartialTestParams) -> tuple[list[str], list[str]]:
    """メイン処理(依存関係JSON生成 => 影響範囲の計算 => テストプランの更新)"""
    dm = DependencyManager(params.root_directory, params.root_package)
    if params.should_generate_dependency_json:
        dm.generate_dependency_json(params.dependency_json_file)
    dm.load(params.dependency_json_file)

    analyzer = ChangeImpactAnalyzer(dm)
    result = analyzer.analyze_change(params.changed_files)

    test_plan_file = TestPlanFile(params.test_plan_file)
    kept, removed = test_plan_file.prune(result["impacted"], dry_run=params.dry_run)
    display_impact_result(result, kept, removed)
    return kept, removed


def show_version_and_exit():
    print(f"partialtest version {partialtest.__version__}")
    sys.exit(0)


def show_usage_and_exit():
    print("\033[31mエラー: ルートディレクトリ、ルートパッケージ、テストプランが指定されていません。\033[0m")
    print("\033[92m使用方法: partialtest <ルートディレクトリ> <ルートパッケージ> <テストプラン> [変更ファイル ...]\033[0m")
    print("\033[33m例:\033[0m partialtest /work/MyApp/ Packages/AppPackage MyApp Packages/Foo/Sources/Foo/Foo.swift")
    print("  説明: Fooパッケージとそれに依存するパッケージのテストだけを MyApp.xctestplan に残します。")
    sys.exit(1)


if __name__ == "__main__":
    main()
