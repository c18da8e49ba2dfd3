from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from partialtest.analyzer.dependency_map.dependency_types import ImpactResult
from partialtest.schema.schema import PartialTestParams

console = Console(width=120)


def prepare_table_common(title: str, title_style: str = "bold") -> Table:
    table = Table(title=title, title_style=title_style)
    table.add_column("項目", style="cyan", no_wrap=True)

    # ローカルマシンに設定されているタイムゾーンを取得
    local_tz = datetime.now().astimezone().tzinfo
    table.caption = f"取得日時: {datetime.now(tz=local_tz).strftime('%Y-%m-%d %H:%M:%S')}"
    table.caption_justify = "left"
    return table


def display_params(params: PartialTestParams):
    """実行パラメータを整形して表示します。"""
    table = prepare_table_common("PartialTestParams")
    table.add_column("値", style="white")

    table.add_row("ルートディレクトリ", params.root_directory)
    table.add_row("ルートパッケージ", params.root_package)
    table.add_row("テストプラン", params.test_plan_file)
    table.add_row("依存関係JSON", params.dependency_json_file)
    table.add_row("変更ファイル数", str(len(params.changed_files)))
    table.add_row("dry run", str(params.dry_run))

    console.print(Panel(table, title="実行情報", border_style="green"))


def display_impact_result(result: ImpactResult, kept: list[str], removed: list[str]):
    """影響範囲とテストプランの変更結果を表示します。"""
    table = prepare_table_common("影響を受けたパッケージ")
    table.add_column("パス", style="white")
    table.add_column("変更", style="yellow")

    changed_packages = result["changed_packages"]
    for dependency in sorted(result["impacted"], key=lambda d: (d.name, d.path)):
        mark = "changed" if dependency.name in changed_packages else ""
        table.add_row(dependency.name, dependency.path, mark)

    console.print(Panel(table, title="影響範囲", border_style="green"))

    for name in sorted(result["dependents"]):
        dependents = ", ".join(sorted(result["dependents"][name])) or "-"
        console.print(f"[cyan]{name}[/cyan] <= {dependents}")

    style = "green" if kept else "yellow"
    summary = f"残したテストターゲット: {len(kept)}\n削除したテストターゲット: {len(removed)}"
    console.print(Panel(summary, title="テストプラン", border_style=style))


def display_error(message: str):
    console.print(Panel(message, title="エラー", style="red"))
