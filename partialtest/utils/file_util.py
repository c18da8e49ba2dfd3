import json
import os
from typing import Any

from partialtest import settings
from partialtest.utils.log_util import log


class FileUtil:
    @staticmethod
    def read_file(file_path: str) -> str:
        """ファイルを読み込む(存在しない場合はFileNotFoundErrorをそのまま送出する)"""
        with open(file_path, encoding="utf-8") as file:
            return file.read()

    @staticmethod
    def write_file(file_path: str, content: str) -> str:
        if not file_path:
            raise ValueError("ファイルパスが空です。")

        file_dir = os.path.dirname(file_path)
        if file_dir != "" and not os.path.exists(file_dir):
            os.makedirs(file_dir, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as file:
            file.write(content)
        log("write_file file_path=%s, content(len)=%d", file_path, len(content))
        return file_path

    @staticmethod
    def read_json(file_path: str) -> Any:
        content = FileUtil.read_file(file_path)
        return json.loads(content)

    @staticmethod
    def write_json(file_path: str, data: Any, indent: int | None = settings.test_plan_indent) -> str:
        # キーの順番は読み込んだときのまま維持する
        content = json.dumps(data, indent=indent, ensure_ascii=False)
        return FileUtil.write_file(file_path, content + "\n")
