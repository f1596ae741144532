"""サフィックス補完マッチャー。

入力済みテキストの末尾と候補サフィックスの先頭が重なる候補を探し、
補完後の文字列を生成する。状態を持たない純粋関数のみで構成される。
"""

from collections.abc import Iterator, Sequence

from suffix_complete.types import Completion


def _fold(value: str, ignore_case: bool) -> Sequence[str]:
    """比較用に1文字ずつ小文字化する。添字は元の文字列と一致したまま保たれる。"""
    if not ignore_case:
        return value
    # "İ".lower() は2文字になる
    return [ch.lower() for ch in value]


def _overlap(compare_text: Sequence[str], compare_candidate: Sequence[str]) -> int | None:
    """
    正規化済みテキストと候補の重なりの長さを返す。長さは元の文字数で数える。

    候補の先頭文字（アンカー）がテキスト中に最初に現れる位置だけを起点とし、
    それ以降の出現位置は試さない。

    Returns:
        重なりがテキスト末尾まで届く場合はその長さ、それ以外はNone
    """
    anchor = compare_candidate[0]
    location = next((i for i, ch in enumerate(compare_text) if ch == anchor), None)
    if location is None:
        return None

    length = 1
    while (
        length < len(compare_candidate)
        and location + length < len(compare_text)
        and compare_candidate[length] == compare_text[location + length]
    ):
        length += 1

    # テキストに重なり以降の文字が残っている場合は不一致
    if len(compare_text) != location + length:
        return None
    return length


def iter_matches(
    typed_text: str, candidates: Sequence[str], ignore_case: bool = False
) -> Iterator[Completion]:
    """
    有効な補完を候補の順序どおりに遅延生成する。

    アルゴリズム:
    1. ignore_caseの場合、比較用にテキストと候補を1文字ずつ小文字化
    2. 空の候補はスキップ
    3. 候補の先頭文字がテキスト中で最初に現れる位置を探す
    4. そこから一致する限り重なりを伸ばす
    5. 重なりがテキスト末尾まで届く候補だけを補完として返す

    補完文字列は元の（小文字化していない）テキストと候補から組み立てる。

    Args:
        typed_text: ユーザー入力テキスト
        candidates: 候補サフィックスのシーケンス
        ignore_case: Trueの場合、大文字小文字を区別せずに比較する

    Yields:
        Completion: 有効な候補ごとの補完
    """
    if not candidates or not typed_text:
        return

    compare_text = _fold(typed_text, ignore_case)

    for candidate in candidates:
        compare_candidate = _fold(candidate, ignore_case)
        if not compare_candidate:
            continue

        length = _overlap(compare_text, compare_candidate)
        if length is None:
            continue

        yield Completion(
            text=typed_text + candidate[length:],
            typed_text=typed_text,
            candidate=candidate,
            overlap=length,
        )


def find_match(
    typed_text: str, candidates: Sequence[str], ignore_case: bool = False
) -> Completion | None:
    """最初に有効となった候補の補完を返す。以降の候補は調べない。"""
    return next(iter_matches(typed_text, candidates, ignore_case), None)


def match(typed_text: str, candidates: Sequence[str], ignore_case: bool = False) -> str | None:
    """
    入力テキストを候補サフィックスで補完する。

    Args:
        typed_text: ユーザー入力テキスト
        candidates: 候補サフィックスのシーケンス（順序が優先度）
        ignore_case: Trueの場合、大文字小文字を区別せずに比較する

    Returns:
        補完後の文字列（typed_text + 候補の残り部分）。一致がない場合はNone

    Example:
        >>> match("john@ex", ["@example.com"])
        'john@example.com'
        >>> match("AB", ["abc"], ignore_case=True)
        'ABc'
    """
    completion = find_match(typed_text, candidates, ignore_case)
    if completion is None:
        return None
    return completion.text
