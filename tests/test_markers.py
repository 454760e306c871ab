import itertools

import pytest

from adventatlas.errors import WindowSizeError
from adventatlas.markers import START_OF_MESSAGE, START_OF_PACKET, find_marker, find_markers


@pytest.mark.parametrize("stream, packet, message", [
    ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7, 19),
    ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
    ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
    ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
    ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
])
def test_puzzle_examples(stream, packet, message):
    assert find_marker(stream, START_OF_PACKET) == packet
    assert find_marker(stream, START_OF_MESSAGE) == message


def test_window_longer_than_stream_is_not_found():
    assert find_marker("abc", 4) is None
    assert find_marker("", 1) is None


def test_exact_length_distinct_stream():
    assert find_marker("abcd", 4) == 4


def test_never_distinct():
    assert find_marker("aaaaaaaa", 2) is None
    # window wider than the alphabet can never be distinct
    assert find_marker("abababababab", 3) is None


def test_window_of_one_matches_first_character():
    assert find_marker("zzz", 1) == 1


def test_accepts_any_iterable():
    assert find_marker(iter("mjqjpqmgbljsphdztnvjfqwrcgsmlb"), 4) == 7
    assert find_marker(["ab", "cd", "ab", "ef"], 2) == 2


def test_invalid_window_size():
    with pytest.raises(WindowSizeError):
        find_marker("abc", -2)
    with pytest.raises(ValueError):
        find_marker("abc", 0)


@pytest.mark.parametrize("w", [1, 2, 3, 4, 5])
def test_result_is_first_distinct_window(w):
    for chars in itertools.product("abc", repeat=6):
        s = "".join(chars)
        pos = find_marker(s, w)
        windows = [s[i - w:i] for i in range(w, len(s) + 1)]
        distinct = [i for i, win in zip(range(w, len(s) + 1), windows) if len(set(win)) == w]
        assert pos == (distinct[0] if distinct else None)


def test_find_markers_per_line():
    text = "mjqjpqmgbljsphdztnvjfqwrcgsmlb\n\naaaa\nbvwbjplbgvbhsrlpgdmjqwftvncz\n"
    assert find_markers(text, 4) == [7, None, 5]


def test_find_markers_keeps_whitespace_in_stream():
    # leading blanks are stream characters: "  ab" repeats, " abc" does not
    assert find_markers("  abcd\r\nabcd\n", 4) == [5, 4]
    assert find_markers(" a a \n", 4) == [None]
