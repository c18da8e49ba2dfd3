import shlex
import subprocess
from typing import Any

from partialtest.utils.log_util import log


class SubprocessUtil:
    CalledProcessError = subprocess.CalledProcessError
    TimeoutExpired = subprocess.TimeoutExpired

    @staticmethod
    def quote(s: str | list[str]) -> str | list[str]:
        """
        文字列または文字列のリストをシェルコマンド用に安全にクオートします。

        引数:
            s (str | list[str]): クオートする文字列または文字列のリスト。

        戻り値:
            str | list[str]: クオートされた文字列または文字列のリスト。
        """
        if isinstance(s, list):
            return [shlex.quote(arg) for arg in s]
        return shlex.quote(s)

    @staticmethod
    def run(
        args: str | list[str],
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        encoding: str = "utf-8",
        errors: str | None = None,
        timeout: float | None = None,
        *,  # ↑位置引数(args=とか省略可) ココから後はキーワード引数↓
        text: bool = True,
        capture_output: bool = False,
        check: bool = True,
        shell: bool = False,
    ) -> subprocess.CompletedProcess:
        """
        サブプロセスでコマンドを実行します。

        引数:
            args (str または list[str]): 実行するコマンド。
            cwd (Optional[str]): コマンドの作業ディレクトリ。
            env (Optional[Dict[str, str]]): 新しいプロセスの環境変数。
            timeout (Optional[float]): プロセスがtimeout秒後に終了しない場合、TimeoutExpired例外を発生させます。
            capture_output (bool): Trueの場合、stdoutとstderrをキャプチャします。
            check (bool): Trueの場合、終了コードが0以外ならCalledProcessErrorを発生させます。
            shell (bool): Trueの場合、シェルを通してコマンドを実行します。

        戻り値:
            subprocess.CompletedProcess: CompletedProcessインスタンス。

        例外:
            subprocess.CalledProcessError: checkがTrueで、プロセスが非ゼロの終了ステータスを返した場合。
            subprocess.TimeoutExpired: タイムアウトが発生した場合。
            FileNotFoundError: 実行ファイルが見つからない場合。
        """
        kwargs: dict[str, Any] = {
            "args": args,
            "cwd": cwd,
            "env": env,
            "shell": shell,
            "timeout": timeout,
            "capture_output": capture_output,
            "text": text,
            "encoding": encoding,
            "errors": errors,
        }

        # Remove None values to use default subprocess.run behavior
        kwargs = {k: v for k, v in kwargs.items() if v is not None}

        log("run args=%s", args)
        return subprocess.run(**kwargs, check=check)
