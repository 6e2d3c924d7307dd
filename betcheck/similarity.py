def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between ``a`` and ``b``.

    Fills the full (len(a)+1) x (len(b)+1) table; inserting, deleting or
    replacing a character each cost one edit.
    """
    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i, ca in enumerate(a, start=1):
        for j, cb in enumerate(b, start=1):
            replace = table[i - 1][j - 1] + (ca != cb)
            table[i][j] = min(table[i - 1][j] + 1, table[i][j - 1] + 1, replace)

    return table[-1][-1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1]; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - edit_distance(a, b) / longest


def is_similar_text(a: str, b: str) -> bool:
    """
    Loose operator-name comparison: one name inside the other, or at most
    30% of the longer name in edits, never more than 2.
    """
    if a in b or b in a:
        return True

    allowed = min(2, int(max(len(a), len(b)) * 0.3))
    return edit_distance(a, b) <= allowed
