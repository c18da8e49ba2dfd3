from collections.abc import Iterable

from partialtest import settings
from partialtest.utils.log_util import log, log_inout_debug


def extract_package_name(file_path: str, packages_dir: str = settings.packages_dir_name) -> str | None:
    """変更ファイルのパスからパッケージ名を取り出す

    例: "App/Packages/Foo/Sources/Foo/Bar.swift" => "Foo"

    packages_dir の直後のセグメントをパッケージ名とする。
    パッケージのディレクトリ配下のファイルでなければ None を返す。
    """
    if not file_path or not packages_dir:
        return None
    segments = [segment for segment in file_path.replace("\\", "/").split("/") if segment]
    for i, segment in enumerate(segments):
        if segment != packages_dir:
            continue
        # パッケージ名の後にファイル(またはディレクトリ)が続く必要がある
        if i + 2 < len(segments):
            return segments[i + 1]
        return None
    return None


@log_inout_debug
def extract_changed_packages(
    changed_files: Iterable[str], packages_dir: str = settings.packages_dir_name
) -> set[str]:
    changed_packages = set()
    for file_path in changed_files:
        package_name = extract_package_name(file_path, packages_dir)
        if package_name:
            changed_packages.add(package_name)
        else:
            log("not a package file: %s", file_path)
    return changed_packages
