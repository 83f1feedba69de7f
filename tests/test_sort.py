import random

from marisakit.sort import compare, get_label, insertion_sort, median, sort


def test_get_label():
    s = b"hello"
    assert get_label(s, 0) == ord("h")
    assert get_label(s, 4) == ord("o")
    assert get_label(s, 5) == -1
    assert get_label(s, 10) == -1


def test_median():
    assert median(b"apple", b"banana", b"cherry", 0) == ord("b")
    assert median(b"cherry", b"apple", b"banana", 0) == ord("b")
    assert median(b"a", b"", b"b", 1) == -1


def test_compare():
    assert compare(b"apple", b"banana", 0) < 0
    assert compare(b"banana", b"apple", 0) > 0
    assert compare(b"apple", b"apple", 0) == 0


def test_compare_with_depth():
    assert compare(b"apple", b"apply", 0) < 0
    assert compare(b"apple", b"apply", 4) < 0
    assert compare(b"apple", b"application", 3) < 0


def test_compare_prefix():
    assert compare(b"app", b"apple", 0) < 0
    assert compare(b"apple", b"app", 0) > 0


def test_insertion_sort_simple():
    data = [b"cherry", b"apple", b"banana"]
    count = insertion_sort(data, 0)
    assert data == [b"apple", b"banana", b"cherry"]
    assert count == 3


def test_insertion_sort_empty():
    data = []
    assert insertion_sort(data, 0) == 0
    assert data == []


def test_sort_simple():
    data = [b"cherry", b"apple", b"banana", b"date"]
    sort(data)
    assert data == [b"apple", b"banana", b"cherry", b"date"]


def test_sort_with_common_prefixes():
    data = [b"test", b"testing", b"tester", b"tea"]
    sort(data)
    assert data == [b"tea", b"test", b"tester", b"testing"]


def test_sort_duplicates():
    data = [b"apple", b"banana", b"apple", b"banana"]
    count = sort(data)
    assert data == [b"apple", b"apple", b"banana", b"banana"]
    assert count == 2


def test_sort_already_sorted():
    data = [b"apple", b"banana", b"cherry"]
    sort(data)
    assert data == [b"apple", b"banana", b"cherry"]


def test_sort_reverse_sorted():
    data = [b"cherry", b"banana", b"apple"]
    sort(data)
    assert data == [b"apple", b"banana", b"cherry"]


def test_sort_single_element():
    data = [b"apple"]
    assert sort(data) == 1
    assert data == [b"apple"]


def test_sort_empty():
    data = []
    assert sort(data) == 0
    assert data == []


def test_sort_large_set():
    data = [
        b"zebra", b"apple", b"mango", b"banana", b"orange", b"grape",
        b"kiwi", b"peach", b"lemon", b"cherry", b"date", b"fig",
    ]
    sort(data)
    assert data[0] == b"apple"
    assert data[1] == b"banana"
    assert data[2] == b"cherry"
    assert data[11] == b"zebra"


def test_sort_count_return():
    data = [b"apple", b"apple", b"banana"]
    assert sort(data) == 2


def test_sort_fifteen_words():
    words = [
        b"a", b"app", b"apple", b"application", b"apply", b"banana", b"band",
        b"bank", b"can", b"cat", b"dog", b"door", b"test", b"testing", b"trie",
    ]
    data = list(reversed(words))
    assert sort(data) == 15
    assert data == sorted(words)


def test_sort_many_random_keys_matches_builtin():
    rng = random.Random(1234)
    alphabet = b"abc\x00\xff"
    data = [
        bytes(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
        for _ in range(500)
    ]
    expected = sorted(data)
    count = sort(data)
    assert data == expected
    assert count == len(set(expected))


def test_sort_long_identical_keys():
    data = [b"x" * 3000 for _ in range(40)] + [b"x" * 2999]
    count = sort(data)
    assert data[0] == b"x" * 2999
    assert all(item == b"x" * 3000 for item in data[1:])
    assert count == 2


def test_sort_empty_strings_and_prefixes():
    data = [b"", b"a", b"aa", b""] * 10
    count = sort(data)
    assert data == sorted(data)
    assert count == 3