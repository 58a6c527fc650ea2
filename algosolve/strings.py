"""String algorithms: substrings, palindromes, zigzag, pattern matching."""

import string

_ALNUM = frozenset(string.ascii_letters + string.digits)
_VOWELS = frozenset("aeiouAEIOU")


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        if last_seen.get(ch, -1) >= left:
            left = last_seen[ch] + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost one wins ties."""
    best_pos, best_len = 0, 1
    n = len(s)
    for centre in range(n):
        for left, right in ((centre, centre), (centre - 1, centre)):
            while left >= 0 and right < n and s[left] == s[right]:
                length = right - left + 1
                if length > best_len:
                    best_pos, best_len = left, length
                left -= 1
                right += 1
    return s[best_pos : best_pos + best_len]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be positive")
    if not s or len(s) <= num_rows or num_rows == 1:
        return s
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for position, ch in enumerate(s):
        phase = position % cycle
        rows[min(phase, cycle - phase)].append(ch)
    return "".join("".join(row) for row in rows)


def is_match(s: str, p: str) -> bool:
    """Match ``s`` against pattern ``p`` where '.' is any char and 'x*' repeats x."""
    if p.startswith("*"):
        raise ValueError("pattern cannot start with '*'")
    n, m = len(s), len(p)
    dp = [[False] * (m + 1) for _ in range(n + 1)]
    dp[0][0] = True
    for j in range(2, m + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i, sc in enumerate(s, start=1):
        for j, pc in enumerate(p, start=1):
            if pc == "." or pc == sc:
                dp[i][j] = dp[i - 1][j - 1]
            elif pc == "*":
                dp[i][j] = dp[i][j - 2]
                if p[j - 2] in (".", sc):
                    dp[i][j] = dp[i][j] or dp[i - 1][j]
    return dp[n][m]


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive ones are equal."""
    result: list[str] = []
    for ch in s:
        if len(result) >= 2 and result[-1] == ch and result[-2] == ch:
            continue
        result.append(ch)
    return "".join(result)


def is_valid_word(word: str) -> bool:
    """At least 3 ASCII letters/digits, with a vowel and a consonant."""
    if len(word) < 3 or not all(ch in _ALNUM for ch in word):
        return False
    has_vowel = any(ch in _VOWELS for ch in word)
    has_consonant = any(ch.isalpha() and ch not in _VOWELS for ch in word)
    return has_vowel and has_consonant