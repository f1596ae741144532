"""設定済みの候補でテキスト入力を補完するメインクラス。

このモジュールは、純粋関数であるマッチャーに候補リストと
大文字小文字の設定を束ね、UI層への統一されたインターフェースを提供する。
"""

import json
import warnings
from collections.abc import Callable
from pathlib import Path

from pydantic import validate_call

from suffix_complete import matcher
from suffix_complete.presets import EMAIL_SUFFIXES
from suffix_complete.types import Completion, CompletionList, TextChanged, TopK

TextChangedListener = Callable[[TextChanged], None]


class SuffixCompleter:
    """
    候補サフィックスによるインライン補完を提供するクラス。

    保持する状態は候補リストと大文字小文字の設定のみで、入力テキストは
    呼び出しごとに渡される。UI層はテキスト変更のたびにon_text_changed()を
    呼び出し、返されたイベントに従って補完とプレースホルダーを描画する。

    Example:
        >>> completer = SuffixCompleter(["@example.com"])
        >>> completer.complete("john@EX")
        'john@EXample.com'
        >>> completer.suggestion("john@EX")
        'ample.com'
    """

    def __init__(self, candidates: list[str] | None = None, ignore_case: bool = True) -> None:
        """
        SuffixCompleterを初期化する。

        Args:
            candidates: 候補サフィックスのリスト（先頭ほど優先）
            ignore_case: Trueの場合、大文字小文字を区別せずに比較する
                        （デフォルト: True）
        """
        self._candidates: list[str] = []
        self._listeners: list[TextChangedListener] = []
        self.ignore_case = ignore_case
        if candidates:
            self.set_candidates(candidates)

    @classmethod
    def for_email(cls, ignore_case: bool = True) -> "SuffixCompleter":
        """よく使われるメールドメインを候補に持つインスタンスを生成する。"""
        return cls(list(EMAIL_SUFFIXES), ignore_case=ignore_case)

    # 候補の管理
    @property
    def candidates(self) -> tuple[str, ...]:
        """現在の候補サフィックス（優先順）。"""
        return tuple(self._candidates)

    @validate_call
    def set_candidates(self, candidates: list[str]) -> None:
        """
        候補リストを置き換える。

        Raises:
            ValidationError: 文字列以外の要素が含まれる場合
        """
        self._candidates = list(candidates)

    @validate_call
    def add_candidates(self, candidates: list[str]) -> None:
        """
        候補を末尾に追加する。既存の候補の優先順位は変わらない。

        Raises:
            ValidationError: 文字列以外の要素が含まれる場合
        """
        self._candidates.extend(candidates)

    def load_candidates(self, path: str | Path) -> None:
        """
        JSONファイルから候補を読み込み、末尾に追加する。

        ファイルは文字列の配列を含むこと。文字列以外の要素は警告を出して
        スキップし、空文字列は警告を出したうえで保持する（照合時に無視される）。

        Args:
            path: 候補ファイルへのパス

        Raises:
            FileNotFoundError: ファイルが存在しない場合
            ValueError: パスがディレクトリの場合、または配列でない場合
        """
        candidate_file = Path(path)
        if not candidate_file.exists():
            raise FileNotFoundError(f"Candidate file not found: {path}")
        if candidate_file.is_dir():
            raise ValueError(f"Expected file, got directory: {path}")

        with open(candidate_file, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(
                f"Invalid candidate file format: expected list, got {type(data).__name__}"
            )

        loaded: list[str] = []
        for index, value in enumerate(data):
            if not isinstance(value, str):
                warnings.warn(
                    f"Skipping non-string candidate at index {index} in {path}: {value!r}",
                    RuntimeWarning,
                    stacklevel=2,
                )
                continue
            if not value:
                warnings.warn(
                    f"Empty candidate at index {index} in {path} will never match.",
                    RuntimeWarning,
                    stacklevel=2,
                )
            loaded.append(value)

        self._candidates.extend(loaded)

    @staticmethod
    def dump_candidates(candidates: list[str]) -> str:
        """
        候補リストをload_candidates()で読み込めるJSON文字列に変換する。

        Example:
            >>> SuffixCompleter.dump_candidates(["@gmail.com", "@yahoo.co.jp"])
            '[\\n  "@gmail.com",\\n  "@yahoo.co.jp"\\n]'
        """
        return json.dumps(list(candidates), ensure_ascii=False, indent=2)

    # 補完
    def find(self, text: str) -> Completion | None:
        """最初に一致した候補の補完を返す。"""
        return matcher.find_match(text, self._candidates, self.ignore_case)

    def complete(self, text: str) -> str | None:
        """
        入力テキストの補完後の文字列を返す。

        Returns:
            補完後の文字列。一致がない場合はNone
        """
        return matcher.match(text, self._candidates, self.ignore_case)

    def suggestion(self, text: str) -> str:
        """入力テキストの後ろにインライン表示する補完部分。一致がない場合は空文字列。"""
        completion = self.find(text)
        if completion is None:
            return ""
        return completion.remainder

    @validate_call
    def suggest_all(self, text: str, top_k: TopK = 10) -> CompletionList:
        """
        有効な全ての補完を候補の順序で返す。

        Args:
            text: ユーザー入力テキスト
            top_k: 補完の最大数（1〜1000）

        Returns:
            CompletionList: 候補の順序で並んだ補完のリスト

        Raises:
            ValidationError: top_kが1〜1000の範囲外の場合
        """
        items: list[Completion] = []
        for completion in matcher.iter_matches(text, self._candidates, self.ignore_case):
            items.append(completion)
            if len(items) >= top_k:
                break
        return CompletionList(items=items)

    # テキスト変更イベント
    def subscribe(self, listener: TextChangedListener) -> None:
        """テキスト変更イベントのリスナーを登録する。"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: TextChangedListener) -> None:
        """
        登録済みのリスナーを解除する。

        Raises:
            ValueError: リスナーが登録されていない場合
        """
        try:
            self._listeners.remove(listener)
        except ValueError:
            raise ValueError(f"Listener is not subscribed: {listener!r}") from None

    def on_text_changed(self, text: str) -> TextChanged:
        """
        テキスト変更を処理し、イベントを発行する。

        動作:
            1. 現在の候補で入力テキストを照合
            2. 結果からTextChangedイベントを生成
            3. 登録順に全てのリスナーへ同期的に通知
            4. イベントを返す

        リスナーで発生した例外はそのまま呼び出し元に伝播する。
        """
        event = TextChanged.from_completion(text, self.find(text))
        for listener in list(self._listeners):
            listener(event)
        return event
