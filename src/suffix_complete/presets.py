"""組み込みの候補リスト。"""

# よく使われるメールドメイン（先頭ほど優先）
EMAIL_SUFFIXES: tuple[str, ...] = (
    "@gmail.com",
    "@yahoo.com",
    "@hotmail.com",
    "@outlook.com",
    "@icloud.com",
    "@me.com",
    "@mac.com",
    "@aol.com",
    "@live.com",
    "@msn.com",
    "@protonmail.com",
)
