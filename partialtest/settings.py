import os
from os.path import dirname, join

from dotenv import load_dotenv

load_dotenv(verbose=True)

dotenv_path = join(dirname(__file__), ".env")
load_dotenv(dotenv_path)


# packages(変更ファイルのパスからパッケージ名を取り出すときのディレクトリ名)
packages_dir_name = os.getenv("PARTIALTEST_PACKAGES_DIR", "Packages")  # 例: Packages/Foo/Sources/Foo.swift => Foo

# test plan(containerPathの接頭辞 例: "container:Packages/Foo")
container_prefix = os.getenv("PARTIALTEST_CONTAINER_PREFIX", "container:")
test_plan_ext = ".xctestplan"
test_plan_indent = 2

# swift package show-dependencies
swift_executable = os.getenv("PARTIALTEST_SWIFT", "swift")
swift_timeout_str = os.getenv("PARTIALTEST_SWIFT_TIMEOUT", "")
swift_timeout = float(swift_timeout_str) if swift_timeout_str else None  # 秒(未指定ならタイムアウトなし)
dependency_json_name = "dep.json"

# log
log_file = os.getenv("PARTIALTEST_LOG_FILE", "")  # 空ならファイル出力しない

# mode
is_debug = os.getenv("IS_DEBUG", "False").lower() in ("true", "1", "t")  # デバッグモード(例: IS_DEBUG=True)
