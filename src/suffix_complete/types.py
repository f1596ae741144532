"""カスタム型定義。

このモジュールは、補完結果と入力変更イベントの値オブジェクトを提供する。
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, model_validator

# top_kの有効範囲: 1〜1000
TopK = Annotated[
    int,
    Field(
        ge=1,
        le=1000,
        description="返す補完の最大数（1〜1000）",
    ),
]


class Completion(BaseModel):
    """一致した候補による補完を表す値オブジェクト（Value Object）。"""

    text: str = Field(min_length=1, description="補完後のテキスト")
    typed_text: str = Field(min_length=1, description="入力済みテキスト")
    candidate: str = Field(min_length=1, description="一致した候補サフィックス")
    overlap: int = Field(ge=1, description="入力末尾と候補先頭の重なりの長さ")

    model_config = {"frozen": True}  # イミュータブル

    @property
    def remainder(self) -> str:
        """入力済みテキストの後ろに表示する補完部分。"""
        return self.text[len(self.typed_text) :]

    @property
    def is_exact(self) -> bool:
        """候補が入力に完全に含まれ、追加する文字がない場合True。"""
        return not self.remainder


class CompletionList(BaseModel):
    """補完のコレクション。

    候補の順序を保持する（スコアによる並べ替えは行わない）。
    """

    items: list[Completion] = Field(default_factory=list, description="補完のリスト")

    def top_k(self, k: int) -> list[Completion]:
        """先頭からk件の補完を取得する。"""
        return self.items[:k]

    def texts(self) -> list[str]:
        """補完後のテキストのリストを返す。"""
        return [c.text for c in self.items]

    def to_dict_list(self) -> list[dict[str, Any]]:
        """辞書リストに変換する。

        Returns:
            {'text', 'typed_text', 'candidate', 'overlap'} 形式の辞書のリスト
        """
        return [c.model_dump() for c in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Completion:
        return self.items[index]


class TextChanged(BaseModel):
    """入力テキストが変更されたときに発行されるイベント。

    UI層はこのイベントを受け取り、プレースホルダーと
    インライン補完の表示を更新する。
    """

    kind: Literal["completion", "no_match"]
    text: str
    completion: Completion | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_kind(self) -> "TextChanged":
        """kindとcompletionの有無が一致することを検証する。"""
        if (self.kind == "completion") != (self.completion is not None):
            raise ValueError(f"kind={self.kind!r} does not match completion={self.completion!r}")
        return self

    @classmethod
    def from_completion(cls, text: str, completion: Completion | None) -> "TextChanged":
        """補完結果からイベントを生成する。"""
        if completion is None:
            return cls(kind="no_match", text=text)
        return cls(kind="completion", text=text, completion=completion)

    @property
    def suggestion(self) -> str:
        """インライン表示する補完部分。一致がない場合は空文字列。"""
        if self.completion is None:
            return ""
        return self.completion.remainder

    @property
    def placeholder_visible(self) -> bool:
        """テキストが空の間だけプレースホルダーを表示する。"""
        return not self.text
